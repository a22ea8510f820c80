"""
Workspace Entity

Shared container for todos and calendar events.
"""

from datetime import datetime
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Relationship, SQLModel

from taskflow.domain.base import utcnow

if TYPE_CHECKING:
    from .workspace_member import WorkspaceMember


class Workspace(SQLModel, table=True):
    """
    Workspace entity.

    Business Rules:
    - Creator becomes owner_id and gets an OWNER membership
    - Must always keep at least one OWNER membership (service layer)
    """

    __tablename__ = "workspaces"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=100)
    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )
    updated_at: datetime = Field(
        default_factory=utcnow, sa_column=Column(DateTime, nullable=False)
    )

    # Relationships
    members: list["WorkspaceMember"] = Relationship(back_populates="workspace")
