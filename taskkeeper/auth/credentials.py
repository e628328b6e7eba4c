"""
Taskkeeper API - Credential Store

Sign-up and credential validation on top of the user repository.
"""

from typing import Optional

from taskkeeper.auth.hashing import PasswordHasher
from taskkeeper.auth.models import User
from taskkeeper.auth.repository import UserRepositoryInterface


class CredentialStore:
    """Stores salted password hashes and checks credentials against them."""

    def __init__(self, repository: UserRepositoryInterface, hasher: PasswordHasher):
        self.repository = repository
        self.hasher = hasher

    async def sign_up(self, username: str, password: str) -> User:
        """Create a user with a fresh per-user salt. Raises ConflictError if taken."""
        salt = self.hasher.gen_salt()
        password_hash = self.hasher.hash(password, salt)
        return await self.repository.create(username, password_hash, salt)

    async def validate_credentials(self, username: str, password: str) -> Optional[str]:
        """Return the username when the password matches, None otherwise."""
        user = await self.repository.get_by_username(username)
        if user is None:
            # Verify anyway so an unknown username costs about as much as a wrong password
            self.hasher.verify(password, self.hasher.dummy_hash())
            return None

        if self.hasher.verify(password, user.password_hash):
            return user.username
        return None
