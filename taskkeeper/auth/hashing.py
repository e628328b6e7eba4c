"""
Taskkeeper API - Password Hashing

Salted password hashing behind a small interface so tests can swap in a fake.
"""

from abc import ABC, abstractmethod
from typing import Optional

import bcrypt


class PasswordHasher(ABC):
    """Salt generation, salted hashing, and verification."""

    _dummy_hash: Optional[str] = None

    @abstractmethod
    def gen_salt(self) -> str:
        pass

    @abstractmethod
    def hash(self, password: str, salt: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass

    def dummy_hash(self) -> str:
        """A hash computed once per hasher, checked against when a user is unknown."""
        if self._dummy_hash is None:
            self._dummy_hash = self.hash("dummy-password", self.gen_salt())
        return self._dummy_hash


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt implementation; the salt string also carries the cost factor."""

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    def gen_salt(self) -> str:
        return bcrypt.gensalt(rounds=self.rounds).decode("utf-8")

    def hash(self, password: str, salt: str) -> str:
        return bcrypt.hashpw(_to_bytes(password), salt.encode("utf-8")).decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        return bcrypt.checkpw(_to_bytes(password), password_hash.encode("utf-8"))


def _to_bytes(password: str) -> bytes:
    # bcrypt only uses the first 72 bytes
    return password.encode("utf-8")[:72]
