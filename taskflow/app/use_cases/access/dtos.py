from pydantic import BaseModel

from taskflow.domain.entities import WorkspaceRole


class Identity(BaseModel):
    """Authenticated caller, decoded from the access token"""

    id: str
    email: str


class WorkspaceAccess(BaseModel):
    """Caller's membership in the workspace a request is scoped to"""

    workspace_id: str
    user_id: str
    role: WorkspaceRole
