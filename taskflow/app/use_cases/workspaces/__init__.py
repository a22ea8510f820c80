"""
Workspace Use Cases

Workspace lifecycle and membership management.
"""

from .create_workspace_use_case import CreateWorkspaceUseCase
from .list_workspaces_use_case import ListWorkspacesUseCase
from .get_workspace_use_case import GetWorkspaceUseCase
from .update_workspace_use_case import UpdateWorkspaceUseCase
from .list_members_use_case import ListMembersUseCase
from .invite_member_use_case import InviteMemberUseCase
from .update_member_role_use_case import UpdateMemberRoleUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .dtos import WorkspaceResponse, WorkspaceMemberResponse, RemoveMemberResponse

__all__ = [
    # Use Cases
    "CreateWorkspaceUseCase",
    "ListWorkspacesUseCase",
    "GetWorkspaceUseCase",
    "UpdateWorkspaceUseCase",
    "ListMembersUseCase",
    "InviteMemberUseCase",
    "UpdateMemberRoleUseCase",
    "RemoveMemberUseCase",
    # DTOs
    "WorkspaceResponse",
    "WorkspaceMemberResponse",
    "RemoveMemberResponse",
]
