import logging

from taskkeeper.auth.credentials import CredentialStore
from taskkeeper.auth.models import User
from taskkeeper.auth.repository import UserRepositoryInterface
from taskkeeper.auth.schemas import AuthCredentialsRequest, SignInRequest, TokenResponse
from taskkeeper.auth.tokens import TokenIssuer
from taskkeeper.errors import UnauthorizedError

logger = logging.getLogger(__name__)


class AuthService:
    """Sign-up, sign-in, and bearer token resolution."""

    def __init__(
        self,
        repository: UserRepositoryInterface,
        credentials: CredentialStore,
        token_issuer: TokenIssuer,
    ):
        self.repository = repository
        self.credentials = credentials
        self.token_issuer = token_issuer

    async def sign_up(self, request: AuthCredentialsRequest) -> None:
        """Register a new user. ConflictError propagates when the username is taken."""
        user = await self.credentials.sign_up(request.username, request.password)
        logger.info("User signed up: username=%s, id=%s", user.username, user.id)

    async def sign_in(self, request: SignInRequest) -> TokenResponse:
        """Validate credentials and issue an access token."""
        username = await self.credentials.validate_credentials(request.username, request.password)
        if username is None:
            logger.info("Failed sign-in for username=%s", request.username)
            raise UnauthorizedError("Invalid credentials")

        access_token = self.token_issuer.issue({"username": username})
        return TokenResponse(access_token=access_token)

    async def resolve_user(self, token: str) -> User:
        """Map a bearer token to the persisted user it was issued for."""
        payload = self.token_issuer.verify(token)
        username = payload.get("username")
        if not isinstance(username, str):
            raise UnauthorizedError("Could not validate credentials")

        user = await self.repository.get_by_username(username)
        if user is None:
            raise UnauthorizedError("Could not validate credentials")
        return user
