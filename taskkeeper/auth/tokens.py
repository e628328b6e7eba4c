"""
Taskkeeper API - Token Issuer

Signed, time-bounded access tokens (JWT).
"""

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from taskkeeper.config import settings
from taskkeeper.errors import UnauthorizedError


class TokenIssuer(ABC):
    """Sign-and-verify capability for access tokens."""

    @abstractmethod
    def issue(self, payload: dict, expires_delta: Optional[timedelta] = None) -> str:
        pass

    @abstractmethod
    def verify(self, token: str) -> dict:
        """Return the decoded payload or raise UnauthorizedError."""
        pass


class JWTTokenIssuer(TokenIssuer):
    """python-jose backed issuer using a process-wide secret."""

    def __init__(
        self,
        secret_key: str = settings.JWT_SECRET_KEY,
        algorithm: str = settings.JWT_ALGORITHM,
        expires_minutes: int = settings.JWT_ACCESS_TOKEN_EXPIRE_MINUTES,
    ):
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.expires_delta = timedelta(minutes=expires_minutes)

    def issue(self, payload: dict, expires_delta: Optional[timedelta] = None) -> str:
        """Create a JWT access token."""
        if expires_delta is None:
            expires_delta = self.expires_delta

        now = datetime.now(timezone.utc)
        to_encode = dict(payload)
        to_encode.update({"exp": now + expires_delta, "iat": now})
        return jwt.encode(to_encode, self.secret_key, algorithm=self.algorithm)

    def verify(self, token: str) -> dict:
        """Decode and validate a JWT token. Expired tokens are rejected by jose."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as e:
            raise UnauthorizedError("Could not validate credentials") from e
