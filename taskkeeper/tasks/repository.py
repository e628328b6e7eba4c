"""
Taskkeeper API - Task Repository

Repository pattern for task data access.
Includes MongoDB implementation for runtime and interface for testing.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional, List

from motor.motor_asyncio import AsyncIOMotorDatabase

from taskkeeper.database import next_sequence
from taskkeeper.tasks.enums import TaskStatus
from taskkeeper.tasks.models import Task
from taskkeeper.tasks.schemas import TaskCreateRequest, TaskFilterParams


class TaskRepositoryInterface(ABC):
    """
    Abstract interface for task repository.

    Enables swapping implementations (MongoDB for runtime, in-memory for tests).
    All operations are scoped by owner to enforce ownership isolation.
    """

    @abstractmethod
    async def get_tasks(self, filters: TaskFilterParams, owner_id: int) -> List[Task]:
        """List tasks for owner with optional status and search filters."""
        pass

    @abstractmethod
    async def find_by_id(self, task_id: int, owner_id: int) -> Optional[Task]:
        pass

    @abstractmethod
    async def create_task(self, data: TaskCreateRequest, owner_id: int) -> Task:
        pass

    @abstractmethod
    async def update_status(self, task: Task, status: TaskStatus) -> Optional[Task]:
        """Persist a new status on an already located task; None if it no longer exists."""
        pass

    @abstractmethod
    async def delete_by_id(self, task_id: int, owner_id: int) -> int:
        """Delete the owner's task and return the number of deleted records."""
        pass


class MongoTaskRepository(TaskRepositoryInterface):
    """
    MongoDB implementation of the task repository.

    All queries are scoped by user_id to enforce ownership isolation.
    """

    COLLECTION_NAME = "tasks"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def get_tasks(self, filters: TaskFilterParams, owner_id: int) -> List[Task]:
        query: dict = {"user_id": owner_id}

        if filters.status is not None:
            query["status"] = filters.status.value

        if filters.search:
            pattern = {"$regex": re.escape(filters.search), "$options": "i"}
            query["$or"] = [{"title": pattern}, {"description": pattern}]

        cursor = self.collection.find(query).sort("_id", 1)
        tasks: List[Task] = []
        async for doc in cursor:
            tasks.append(Task.from_dict(doc))
        return tasks

    async def find_by_id(self, task_id: int, owner_id: int) -> Optional[Task]:
        doc = await self.collection.find_one({"_id": task_id, "user_id": owner_id})
        if doc is None:
            return None
        return Task.from_dict(doc)

    async def create_task(self, data: TaskCreateRequest, owner_id: int) -> Task:
        task = Task(
            id=await next_sequence(self.db, self.COLLECTION_NAME),
            title=data.title,
            description=data.description,
            status=TaskStatus.OPEN,
            user_id=owner_id,
        )
        await self.collection.insert_one(task.to_dict())
        return task

    async def update_status(self, task: Task, status: TaskStatus) -> Optional[Task]:
        result = await self.collection.update_one(
            {"_id": task.id, "user_id": task.user_id},
            {"$set": {"status": status.value}},
        )
        if result.matched_count == 0:
            return None
        task.status = status
        return task

    async def delete_by_id(self, task_id: int, owner_id: int) -> int:
        result = await self.collection.delete_one({"_id": task_id, "user_id": owner_id})
        return result.deleted_count


class InMemoryTaskRepository(TaskRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._tasks: dict[int, Task] = {}
        self._next_id = 1

    def clear(self) -> None:
        self._tasks.clear()
        self._next_id = 1

    async def get_tasks(self, filters: TaskFilterParams, owner_id: int) -> List[Task]:
        search = filters.search.lower() if filters.search else None
        results: List[Task] = []

        for task in self._tasks.values():
            if task.user_id != owner_id:
                continue
            if filters.status is not None and task.status != filters.status:
                continue
            if search and search not in task.title.lower() and search not in task.description.lower():
                continue
            results.append(task)

        results.sort(key=lambda t: t.id)
        return results

    async def find_by_id(self, task_id: int, owner_id: int) -> Optional[Task]:
        task = self._tasks.get(task_id)
        if task is None or task.user_id != owner_id:
            return None
        return task

    async def create_task(self, data: TaskCreateRequest, owner_id: int) -> Task:
        task = Task(
            id=self._next_id,
            title=data.title,
            description=data.description,
            status=TaskStatus.OPEN,
            user_id=owner_id,
        )
        self._tasks[task.id] = task
        self._next_id += 1
        return task

    async def update_status(self, task: Task, status: TaskStatus) -> Optional[Task]:
        stored = self._tasks.get(task.id)
        if stored is None or stored.user_id != task.user_id:
            return None
        stored.status = status
        task.status = status
        return task

    async def delete_by_id(self, task_id: int, owner_id: int) -> int:
        task = self._tasks.get(task_id)
        if task is None or task.user_id != owner_id:
            return 0
        del self._tasks[task_id]
        return 1
