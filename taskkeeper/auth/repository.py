"""
Taskkeeper API - User Repository

Repository pattern for user data access.
Includes MongoDB implementation for runtime and an in-memory one for tests.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from taskkeeper.auth.models import User
from taskkeeper.database import next_sequence
from taskkeeper.errors import ConflictError

logger = logging.getLogger(__name__)

USERNAME_TAKEN = "Username already exists"


class UserRepositoryInterface(ABC):
    """Abstract interface for user repository.

    Usernames are unique; ``create`` raises ConflictError on a duplicate.
    """

    @abstractmethod
    async def create(self, username: str, password_hash: str, salt: str) -> User:
        """Persist a new user and return it with its assigned id."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        pass


class MongoUserRepository(UserRepositoryInterface):
    """MongoDB implementation of the user repository."""

    COLLECTION_NAME = "users"

    def __init__(self, db: AsyncIOMotorDatabase):
        self.db = db
        self.collection = db[self.COLLECTION_NAME]

    async def create(self, username: str, password_hash: str, salt: str) -> User:
        user = User(
            id=await next_sequence(self.db, self.COLLECTION_NAME),
            username=username,
            password_hash=password_hash,
            salt=salt,
        )
        try:
            await self.collection.insert_one(user.to_dict())
        except DuplicateKeyError as e:
            raise ConflictError(USERNAME_TAKEN) from e
        logger.info(f"[MongoUserRepository] Created user: username={username}, id={user.id}")
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        doc = await self.collection.find_one({"username": username})
        if doc is None:
            return None
        return User.from_dict(doc)


class InMemoryUserRepository(UserRepositoryInterface):
    """
    In-memory implementation for CI-safe testing.
    """

    def __init__(self):
        self._users: dict[int, User] = {}
        self._next_id = 1

    def clear(self) -> None:
        self._users.clear()
        self._next_id = 1

    async def create(self, username: str, password_hash: str, salt: str) -> User:
        if any(u.username == username for u in self._users.values()):
            raise ConflictError(USERNAME_TAKEN)
        user = User(id=self._next_id, username=username, password_hash=password_hash, salt=salt)
        self._users[user.id] = user
        self._next_id += 1
        return user

    async def get_by_username(self, username: str) -> Optional[User]:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    def count(self) -> int:
        return len(self._users)
