"""Authentication service implementation."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...exceptions import AuthError, ConflictError, NotFoundError, ValidationError
from ...security import InvalidTokenError, PasswordHasher, TokenService
from ..models.user import User
from ..repositories.user_repository import UserRepository
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .interfaces import IAuthService

logger = logging.getLogger(__name__)

TOKEN_FAILED = "Not authorized, token failed"


class AuthService(IAuthService):
    """Authentication service implementation."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repo = UserRepository(session)
        self.tokens = TokenService(settings)
        self.hasher = PasswordHasher(settings.password_hash_rounds)

    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user."""
        if await self.user_repo.is_email_taken(request.email):
            raise ConflictError("User already exists")

        user_data = {
            "name": request.name,
            "email": request.email,
            "password_hash": self.hasher.hash(request.password),
        }

        try:
            user = await self.user_repo.create_user(user_data)
        except IntegrityError:
            # lost a race with a concurrent registration of the same email
            await self.session.rollback()
            raise ConflictError("User already exists") from None

        logger.info("Registered user %s", user.id)
        return AuthResponse(
            message="User registered successfully",
            user=UserResponse.model_validate(user),
            token=self.tokens.issue(user.id),
        )

    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Login user and return a JWT."""
        user = await self.user_repo.get_by_email(request.email)
        if not user:
            raise NotFoundError("User")

        if not self.hasher.verify(request.password, user.password_hash):
            logger.warning("Failed login for user %s", user.id)
            raise ValidationError("Invalid credentials", field="password")

        logger.info("User %s logged in", user.id)
        return AuthResponse(
            message="Login successful",
            user=UserResponse.model_validate(user),
            token=self.tokens.issue(user.id),
        )

    async def resolve_token(self, token: str) -> User:
        """Verify a bearer token and load its user."""
        try:
            user_id = self.tokens.verify(token)
        except InvalidTokenError as exc:
            logger.warning("Rejected token: %s", exc)
            raise AuthError(TOKEN_FAILED) from None

        user = await self.user_repo.get_by_id(user_id)
        if not user:
            logger.warning("Token for unknown user %s", user_id)
            raise AuthError(TOKEN_FAILED)

        return user
