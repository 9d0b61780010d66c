from typing import Optional

from pydantic import BaseModel


class TaskResponse(BaseModel):
    id: str
    project_id: str
    title: str
    status: str
    creator_id: str
    assignee_id: Optional[str] = None
    created_at: str
    is_blocked: bool = False
