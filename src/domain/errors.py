"""
Error codes and kinds.

Use cases report failures as libs.result.Error(code, message). Each code
belongs to exactly one ErrorKind; the API layer maps kinds to HTTP statuses.
"""

from enum import Enum
from typing import Dict, Optional


class ErrorKind(str, Enum):
    unauthorized = "unauthorized"
    not_a_member = "not_a_member"
    insufficient_permission = "insufficient_permission"
    insufficient_rank = "insufficient_rank"
    not_found = "not_found"
    conflict = "conflict"
    validation = "validation"
    cyclic_dependency = "cyclic_dependency"
    expired = "expired"
    exhausted = "exhausted"


class ErrorCode:
    UNAUTHORIZED = "UNAUTHORIZED"

    NOT_A_MEMBER = "NOT_A_MEMBER"
    INSUFFICIENT_PERMISSION = "INSUFFICIENT_PERMISSION"
    INSUFFICIENT_RANK = "INSUFFICIENT_RANK"
    CANNOT_REMOVE_OWNER = "CANNOT_REMOVE_OWNER"
    OWNER_IMMUTABLE = "OWNER_IMMUTABLE"

    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    INVITATION_NOT_FOUND = "INVITATION_NOT_FOUND"
    INVITATION_DECLINED = "INVITATION_DECLINED"
    TASK_NOT_FOUND = "TASK_NOT_FOUND"
    ROLES_NOT_SEEDED = "ROLES_NOT_SEEDED"

    ALREADY_MEMBER = "ALREADY_MEMBER"
    ALREADY_ACTIVE = "ALREADY_ACTIVE"
    DUPLICATE_DEPENDENCY = "DUPLICATE_DEPENDENCY"

    INVALID_ROLE = "INVALID_ROLE"
    INVALID_INPUT = "INVALID_INPUT"
    SELF_REMOVAL = "SELF_REMOVAL"
    SELF_ROLE_CHANGE = "SELF_ROLE_CHANGE"
    SELF_DEPENDENCY = "SELF_DEPENDENCY"
    CROSS_PROJECT_DEPENDENCY = "CROSS_PROJECT_DEPENDENCY"

    CYCLIC_DEPENDENCY = "CYCLIC_DEPENDENCY"

    INVITE_LINK_INVALID = "INVITE_LINK_INVALID"
    INVITE_LINK_EXPIRED = "INVITE_LINK_EXPIRED"
    INVITE_LINK_EXHAUSTED = "INVITE_LINK_EXHAUSTED"


ERROR_KINDS: Dict[str, ErrorKind] = {
    ErrorCode.UNAUTHORIZED: ErrorKind.unauthorized,
    ErrorCode.NOT_A_MEMBER: ErrorKind.not_a_member,
    ErrorCode.INSUFFICIENT_PERMISSION: ErrorKind.insufficient_permission,
    ErrorCode.INSUFFICIENT_RANK: ErrorKind.insufficient_rank,
    ErrorCode.CANNOT_REMOVE_OWNER: ErrorKind.insufficient_rank,
    ErrorCode.OWNER_IMMUTABLE: ErrorKind.insufficient_rank,
    ErrorCode.PROJECT_NOT_FOUND: ErrorKind.not_found,
    ErrorCode.MEMBER_NOT_FOUND: ErrorKind.not_found,
    ErrorCode.INVITATION_NOT_FOUND: ErrorKind.not_found,
    ErrorCode.INVITATION_DECLINED: ErrorKind.not_found,
    ErrorCode.TASK_NOT_FOUND: ErrorKind.not_found,
    ErrorCode.INVITE_LINK_INVALID: ErrorKind.not_found,
    ErrorCode.ALREADY_MEMBER: ErrorKind.conflict,
    ErrorCode.ALREADY_ACTIVE: ErrorKind.conflict,
    ErrorCode.DUPLICATE_DEPENDENCY: ErrorKind.conflict,
    ErrorCode.INVALID_ROLE: ErrorKind.validation,
    ErrorCode.INVALID_INPUT: ErrorKind.validation,
    ErrorCode.SELF_REMOVAL: ErrorKind.validation,
    ErrorCode.SELF_ROLE_CHANGE: ErrorKind.validation,
    ErrorCode.SELF_DEPENDENCY: ErrorKind.validation,
    ErrorCode.CROSS_PROJECT_DEPENDENCY: ErrorKind.validation,
    ErrorCode.CYCLIC_DEPENDENCY: ErrorKind.cyclic_dependency,
    ErrorCode.INVITE_LINK_EXPIRED: ErrorKind.expired,
    ErrorCode.INVITE_LINK_EXHAUSTED: ErrorKind.exhausted,
}


def kind_of(code: str) -> Optional[ErrorKind]:
    """Kind for an error code; None for codes that signal a server fault"""
    return ERROR_KINDS.get(code)


class UniqueViolation(Exception):
    """Raised by repositories when an insert hits a unique key"""

    def __init__(self, entity: str, detail: str = ""):
        self.entity = entity
        self.detail = detail
        super().__init__(f"Unique constraint violated on {entity}: {detail}")
