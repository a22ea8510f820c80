"""
Taskflow Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import WorkspaceRole, role_level, has_min_role

# Export all entities
from .user import User
from .workspace import Workspace
from .workspace_member import WorkspaceMember
from .refresh_token import RefreshToken

__all__ = [
    # Enums
    "WorkspaceRole",
    "role_level",
    "has_min_role",
    # Entities
    "User",
    "Workspace",
    "WorkspaceMember",
    "RefreshToken",
]
