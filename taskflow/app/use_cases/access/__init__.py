"""
Access Use Cases

Authentication of bearer tokens and workspace role authorization,
consumed by every protected route.
"""

from .authenticate_use_case import AuthenticateUseCase, parse_bearer
from .authorize_workspace_use_case import AuthorizeWorkspaceUseCase, check_workspace_role
from .dtos import Identity, WorkspaceAccess

__all__ = [
    "AuthenticateUseCase",
    "AuthorizeWorkspaceUseCase",
    "check_workspace_role",
    "parse_bearer",
    "Identity",
    "WorkspaceAccess",
]
