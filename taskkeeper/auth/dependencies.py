from typing import Annotated, Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from motor.motor_asyncio import AsyncIOMotorDatabase

from taskkeeper.database import get_database
from taskkeeper.auth.credentials import CredentialStore
from taskkeeper.auth.hashing import BcryptPasswordHasher, PasswordHasher
from taskkeeper.auth.models import User
from taskkeeper.auth.repository import MongoUserRepository, UserRepositoryInterface
from taskkeeper.auth.service import AuthService
from taskkeeper.auth.tokens import JWTTokenIssuer, TokenIssuer
from taskkeeper.errors import UnauthorizedError


# HTTP Bearer token scheme - auto_error=False to handle missing tokens ourselves
bearer_scheme = HTTPBearer(auto_error=False)

_password_hasher = BcryptPasswordHasher()
_token_issuer = JWTTokenIssuer()


def get_user_repository(
    db: Annotated[AsyncIOMotorDatabase, Depends(get_database)]
) -> UserRepositoryInterface:
    """Dependency to get user repository instance."""
    return MongoUserRepository(db)


def get_password_hasher() -> PasswordHasher:
    return _password_hasher


def get_token_issuer() -> TokenIssuer:
    return _token_issuer


def get_auth_service(
    repository: Annotated[UserRepositoryInterface, Depends(get_user_repository)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_issuer: Annotated[TokenIssuer, Depends(get_token_issuer)],
) -> AuthService:
    """Dependency to get AuthService instance."""
    return AuthService(repository, CredentialStore(repository, hasher), token_issuer)


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> User:
    """Resolve the caller from the bearer token or reject with 401."""
    if credentials is None:
        raise UnauthorizedError("Could not validate credentials")

    return await auth_service.resolve_user(credentials.credentials)


# Type alias for cleaner dependency injection
CurrentUser = Annotated[User, Depends(get_current_user)]
