from .create_invite_link_use_case import CreateInviteLinkUseCase
from .join_via_invite_link_use_case import JoinViaInviteLinkUseCase

__all__ = ["CreateInviteLinkUseCase", "JoinViaInviteLinkUseCase"]
