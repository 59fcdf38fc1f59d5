"""
Task Request/Response Models
"""

from datetime import datetime
from typing import Literal, Optional

from pydantic import Field

from clubify.schemas.base import CamelModel, ClubRef, UserRef, UTCDatetime, DEFAULT_CLUB

TaskPriority = Literal["low", "medium", "high", "urgent"]
TaskStatus = Literal["pending", "in_progress", "completed", "cancelled"]


class CreateTaskRequest(CamelModel):
    """Request to assign a task"""
    title: str = Field(..., min_length=1, max_length=200)
    description: Optional[str] = None
    assigned_to: str = Field(..., min_length=1, description="Assignee user id")
    club: str = DEFAULT_CLUB
    deadline: UTCDatetime
    priority: TaskPriority = "medium"


class UpdateTaskRequest(CamelModel):
    """Status change and/or a note to append"""
    status: Optional[TaskStatus] = None
    notes: Optional[str] = None


class TaskNoteResponse(CamelModel):
    id: str
    user: Optional[UserRef]
    content: str
    created_at: datetime


class TaskResponse(CamelModel):
    id: str
    title: str
    description: Optional[str] = None
    assigned_by: Optional[UserRef]
    assigned_to: Optional[UserRef]
    club: Optional[ClubRef]
    deadline: datetime
    priority: TaskPriority
    status: TaskStatus
    completed_at: Optional[datetime] = None
    notes: list[TaskNoteResponse] = []
    created_at: datetime
    updated_at: datetime


class TaskEnvelope(CamelModel):
    success: bool = True
    message: str
    task: TaskResponse


class TaskListResponse(CamelModel):
    success: bool = True
    tasks: list[TaskResponse]
