"""
Workspace Use Case DTOs (Data Transfer Objects)

All Command and Response classes for workspace domain.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from taskflow.domain.entities import User, Workspace, WorkspaceMember, WorkspaceRole


class WorkspaceResponse(BaseModel):
    """Workspace as seen by one of its members"""

    id: str
    name: str
    owner_id: str
    created_at: datetime
    updated_at: datetime
    role: WorkspaceRole

    @classmethod
    def build(cls, workspace: Workspace, role: WorkspaceRole) -> "WorkspaceResponse":
        return cls(
            id=str(workspace.id),
            name=workspace.name,
            owner_id=str(workspace.owner_id),
            created_at=workspace.created_at,
            updated_at=workspace.updated_at,
            role=role,
        )


class WorkspaceMemberResponse(BaseModel):
    """Member of a workspace"""

    user_id: str
    email: str
    name: Optional[str] = None
    role: WorkspaceRole
    created_at: datetime

    @classmethod
    def build(cls, membership: WorkspaceMember, user: User) -> "WorkspaceMemberResponse":
        return cls(
            user_id=str(membership.user_id),
            email=user.email,
            name=user.name,
            role=membership.role,
            created_at=membership.created_at,
        )


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    status: str
