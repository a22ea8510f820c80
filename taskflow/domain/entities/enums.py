"""
Taskflow Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum
from typing import Union


class WorkspaceRole(str, Enum):
    """User role within a workspace"""

    owner = "OWNER"
    admin = "ADMIN"
    member = "MEMBER"


ROLE_HIERARCHY = {
    WorkspaceRole.owner: 3,
    WorkspaceRole.admin: 2,
    WorkspaceRole.member: 1,
}


def role_level(role: Union[WorkspaceRole, str, None]) -> int:
    """
    Numeric rank of a role: OWNER=3, ADMIN=2, MEMBER=1, anything else 0.

    Role checks compare these ranks, never the role strings.
    """
    try:
        return ROLE_HIERARCHY[WorkspaceRole(role)]
    except ValueError:
        return 0


def has_min_role(role: Union[WorkspaceRole, str, None], min_role: WorkspaceRole) -> bool:
    return role_level(role) >= role_level(min_role)
