"""
User Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UserProfileResponse(BaseModel):
    """Profile of the authenticated user"""

    id: str
    email: str
    name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    workspace_count: int


class ChangePasswordResponse(BaseModel):
    """Response for change password use case"""

    message: str
    revoked_sessions: int
