"""
Taskkeeper API - Task Router

CRUD endpoints for task management.
All endpoints are JWT-protected and user-scoped.
"""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, Query, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskkeeper.database import get_database
from taskkeeper.auth.dependencies import CurrentUser
from taskkeeper.tasks.models import Task
from taskkeeper.tasks.service import TaskService
from taskkeeper.tasks.repository import MongoTaskRepository, TaskRepositoryInterface
from taskkeeper.tasks.schemas import (
    TaskCreateRequest,
    TaskFilterParams,
    TaskStatusUpdateRequest,
    TaskResponse,
    TaskDeleteResponse,
)


router = APIRouter(prefix="/tasks", tags=["Tasks"])

# Ids are stored as 64-bit integers
TaskId = Annotated[int, Path(ge=1, le=2**63 - 1)]


async def get_task_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> TaskRepositoryInterface:
    """Dependency to get task repository instance."""
    return MongoTaskRepository(db)


async def get_task_service(
    repository: Annotated[TaskRepositoryInterface, Depends(get_task_repository)]
) -> TaskService:
    """Dependency to get task service instance."""
    return TaskService(repository)


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse.model_validate(task, from_attributes=True)


@router.get(
    "",
    response_model=List[TaskResponse],
    summary="List tasks",
)
async def get_tasks(
    filters: Annotated[TaskFilterParams, Query()],
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> List[TaskResponse]:
    """
    List the current user's tasks.

    - `status`: only tasks with this status
    - `search`: case-insensitive match against title or description
    """
    tasks = await service.get_tasks(filters, current_user)
    return [_to_response(task) for task in tasks]


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    summary="Get a task by ID",
)
async def get_task_by_id(
    task_id: TaskId,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Get a specific task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    return _to_response(await service.get_task_by_id(task_id, current_user))


@router.post(
    "",
    response_model=TaskResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new task",
)
async def create_task(
    request: TaskCreateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Create a new task for the authenticated user.

    New tasks always start as OPEN.
    """
    return _to_response(await service.create_task(request, current_user))


@router.patch(
    "/{task_id}/status",
    response_model=TaskResponse,
    summary="Update a task's status",
)
async def update_task_status(
    task_id: TaskId,
    request: TaskStatusUpdateRequest,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskResponse:
    """
    Update the status of a task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    task = await service.update_status_by_id(task_id, request.status, current_user)
    return _to_response(task)


@router.delete(
    "/{task_id}",
    response_model=TaskDeleteResponse,
    summary="Delete a task",
)
async def delete_task_by_id(
    task_id: TaskId,
    current_user: CurrentUser,
    service: Annotated[TaskService, Depends(get_task_service)],
) -> TaskDeleteResponse:
    """
    Delete a task by ID.

    Returns 404 if the task doesn't exist or belongs to another user.
    """
    await service.delete_task_by_id(task_id, current_user)
    return TaskDeleteResponse(message="Task deleted successfully", id=task_id)
