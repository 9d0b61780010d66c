from .accept_invitation_use_case import AcceptInvitationUseCase
from .decline_invitation_use_case import DeclineInvitationUseCase
from .get_invitable_roles_use_case import GetInvitableRolesUseCase
from .get_invitation_details_use_case import GetInvitationDetailsUseCase
from .invite_member_use_case import InviteMemberUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .update_member_role_use_case import UpdateMemberRoleUseCase

__all__ = [
    "AcceptInvitationUseCase",
    "DeclineInvitationUseCase",
    "GetInvitableRolesUseCase",
    "GetInvitationDetailsUseCase",
    "InviteMemberUseCase",
    "RemoveMemberUseCase",
    "UpdateMemberRoleUseCase",
]
