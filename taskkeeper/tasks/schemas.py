"""
Taskkeeper API - Task Schemas

Pydantic models for task API requests and responses.
"""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from taskkeeper.tasks.enums import TaskStatus


class TaskCreateRequest(BaseModel):
    """Request model for creating a task."""

    title: str = Field(min_length=1, description="Task title")
    description: str = Field(min_length=1, description="Task description")


class TaskFilterParams(BaseModel):
    """Query filters for listing tasks."""

    status: Optional[TaskStatus] = Field(default=None, description="Filter by task status")
    search: Optional[str] = Field(
        default=None,
        min_length=1,
        description="Case-insensitive substring of title or description",
    )


class TaskStatusUpdateRequest(BaseModel):
    """Request model for changing a task's status."""

    status: TaskStatus = Field(description="New task status")


class TaskResponse(BaseModel):
    """Response model for a single task."""

    id: int = Field(description="Task ID")
    title: str = Field(description="Task title")
    description: str = Field(description="Task description")
    status: TaskStatus = Field(description="Task status")
    user_id: int = Field(
        validation_alias=AliasChoices("user_id", "userId"),
        serialization_alias="userId",
        description="Owner user ID",
    )


class TaskDeleteResponse(BaseModel):
    """Response model for task deletion."""

    message: str = Field(description="Success message")
    id: int = Field(description="Deleted task ID")
