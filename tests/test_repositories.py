"""
Taskkeeper API - MongoDB Repository Tests

Checks the queries the Mongo repositories send, using a mocked Motor database.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest
from pymongo.errors import DuplicateKeyError

from taskkeeper.auth.repository import MongoUserRepository
from taskkeeper.errors import ConflictError
from taskkeeper.tasks.enums import TaskStatus
from taskkeeper.tasks.models import Task
from taskkeeper.tasks.repository import MongoTaskRepository
from taskkeeper.tasks.schemas import TaskCreateRequest, TaskFilterParams


class AsyncCursor:
    """Minimal stand-in for a Motor cursor."""

    def __init__(self, docs):
        self.docs = docs

    def sort(self, *args):
        return self

    def __aiter__(self):
        self._it = iter(self.docs)
        return self

    async def __anext__(self):
        try:
            return next(self._it)
        except StopIteration:
            raise StopAsyncIteration


@pytest.fixture
def collections():
    return {
        "tasks": MagicMock(),
        "users": MagicMock(),
        "counters": MagicMock(),
    }


@pytest.fixture
def db(collections):
    mock_db = MagicMock()
    mock_db.__getitem__.side_effect = lambda name: collections[name]
    collections["counters"].find_one_and_update = AsyncMock(return_value={"_id": "x", "seq": 7})
    return mock_db


class TestMongoTaskRepository:
    def test_get_tasks_builds_owner_scoped_query(self, db, collections):
        doc = {"_id": 1, "title": "a.b", "description": "d", "status": "OPEN", "user_id": 12}
        collections["tasks"].find.return_value = AsyncCursor([doc])
        repo = MongoTaskRepository(db)

        tasks = asyncio.run(repo.get_tasks(TaskFilterParams(status=TaskStatus.OPEN, search="a.b"), 12))

        query = collections["tasks"].find.call_args.args[0]
        assert query["user_id"] == 12
        assert query["status"] == "OPEN"
        assert query["$or"][0]["title"] == {"$regex": r"a\.b", "$options": "i"}
        assert tasks == [Task.from_dict(doc)]

    def test_find_by_id_uses_id_and_owner(self, db, collections):
        collections["tasks"].find_one = AsyncMock(return_value=None)
        repo = MongoTaskRepository(db)

        assert asyncio.run(repo.find_by_id(3, 12)) is None
        collections["tasks"].find_one.assert_awaited_once_with({"_id": 3, "user_id": 12})

    def test_create_task_allocates_sequence_id(self, db, collections):
        collections["tasks"].insert_one = AsyncMock()
        repo = MongoTaskRepository(db)

        task = asyncio.run(repo.create_task(TaskCreateRequest(title="t", description="d"), 12))

        assert task.id == 7
        assert task.status == TaskStatus.OPEN
        collections["tasks"].insert_one.assert_awaited_once_with(task.to_dict())

    def test_update_status_scoped_to_owner(self, db, collections):
        collections["tasks"].update_one = AsyncMock(return_value=MagicMock(matched_count=1))
        repo = MongoTaskRepository(db)
        task = Task(id=3, title="t", description="d", status=TaskStatus.OPEN, user_id=12)

        result = asyncio.run(repo.update_status(task, TaskStatus.DONE))

        assert result.status == TaskStatus.DONE
        collections["tasks"].update_one.assert_awaited_once_with(
            {"_id": 3, "user_id": 12}, {"$set": {"status": "DONE"}}
        )

    def test_update_status_of_vanished_task(self, db, collections):
        collections["tasks"].update_one = AsyncMock(return_value=MagicMock(matched_count=0))
        repo = MongoTaskRepository(db)
        task = Task(id=3, title="t", description="d", status=TaskStatus.OPEN, user_id=12)

        assert asyncio.run(repo.update_status(task, TaskStatus.DONE)) is None
        assert task.status == TaskStatus.OPEN

    def test_delete_reports_affected_count(self, db, collections):
        collections["tasks"].delete_one = AsyncMock(return_value=MagicMock(deleted_count=0))
        repo = MongoTaskRepository(db)

        assert asyncio.run(repo.delete_by_id(3, 12)) == 0
        collections["tasks"].delete_one.assert_awaited_once_with({"_id": 3, "user_id": 12})


class TestMongoUserRepository:
    def test_duplicate_username_raises_conflict(self, db, collections):
        collections["users"].insert_one = AsyncMock(side_effect=DuplicateKeyError("dup"))
        repo = MongoUserRepository(db)

        with pytest.raises(ConflictError):
            asyncio.run(repo.create("alice", "hash", "salt"))

    def test_get_by_username(self, db, collections):
        collections["users"].find_one = AsyncMock(
            return_value={"_id": 1, "username": "alice", "password_hash": "h", "salt": "s"}
        )
        repo = MongoUserRepository(db)

        user = asyncio.run(repo.get_by_username("alice"))

        assert user.id == 1
        collections["users"].find_one.assert_awaited_once_with({"username": "alice"})
