"""
Workspace Member Entity

Links User to Workspace with a role.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, Relationship, SQLModel

from taskflow.domain.base import utcnow

from .enums import WorkspaceRole

if TYPE_CHECKING:
    from .user import User
    from .workspace import Workspace


class WorkspaceMember(SQLModel, table=True):
    """
    WorkspaceMember entity - (workspace, user, role).

    Business Rules:
    - (workspace_id, user_id) must be unique
    - Role hierarchy OWNER > ADMIN > MEMBER
    - Sole OWNER cannot be removed or downgraded
    """

    __tablename__ = "workspace_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    workspace_id: UUID = Field(foreign_key="workspaces.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: WorkspaceRole = Field(nullable=False)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    # Relationships
    user: "User" = Relationship(back_populates="memberships")
    workspace: "Workspace" = Relationship(back_populates="members")

    __table_args__ = (
        Index("idx_workspace_member_workspace_user", "workspace_id", "user_id", unique=True),
        Index("idx_workspace_member_role", "workspace_id", "role"),
    )
