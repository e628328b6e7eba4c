"""
Taskkeeper API - Task Service

Business logic for task operations. Every lookup is scoped to the calling
user; a task owned by someone else is reported exactly like a missing one.
"""

import logging
from typing import List

from taskkeeper.auth.models import User
from taskkeeper.errors import NotFoundError
from taskkeeper.tasks.enums import TaskStatus
from taskkeeper.tasks.models import Task
from taskkeeper.tasks.repository import TaskRepositoryInterface
from taskkeeper.tasks.schemas import TaskCreateRequest, TaskFilterParams

logger = logging.getLogger(__name__)


def task_not_found(task_id: int) -> NotFoundError:
    return NotFoundError(f'Task with ID "{task_id}" not found')


class TaskService:
    """Service layer for task business logic."""

    def __init__(self, repository: TaskRepositoryInterface):
        self.repository = repository

    async def get_tasks(self, filters: TaskFilterParams, user: User) -> List[Task]:
        """List the user's tasks matching the filters."""
        return await self.repository.get_tasks(filters, user.id)

    async def get_task_by_id(self, task_id: int, user: User) -> Task:
        """Get a task by ID, scoped to owner. Raises NotFoundError."""
        task = await self.repository.find_by_id(task_id, user.id)
        if task is None:
            raise task_not_found(task_id)
        return task

    async def create_task(self, request: TaskCreateRequest, user: User) -> Task:
        """Create a new OPEN task for the user."""
        task = await self.repository.create_task(request, user.id)
        logger.info("Created task id=%s for user=%s", task.id, user.username)
        return task

    async def update_status_by_id(self, task_id: int, status: TaskStatus, user: User) -> Task:
        """Set the status of one of the user's tasks."""
        task = await self.get_task_by_id(task_id, user)
        updated = await self.repository.update_status(task, status)
        if updated is None:
            # Deleted between the lookup and the update
            raise task_not_found(task_id)
        logger.info("Task id=%s status set to %s by user=%s", task_id, status.value, user.username)
        return updated

    async def delete_task_by_id(self, task_id: int, user: User) -> None:
        """Delete one of the user's tasks. Raises NotFoundError when nothing was deleted."""
        deleted = await self.repository.delete_by_id(task_id, user.id)
        if deleted == 0:
            raise task_not_found(task_id)
        logger.info("Deleted task id=%s for user=%s", task_id, user.username)
