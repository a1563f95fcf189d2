"""Authentication middleware."""

import logging
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..dependencies import get_app_settings
from ..core.models.user import User
from ..core.services import AuthService
from ..database import get_db_session
from ..exceptions import AuthError

logger = logging.getLogger(__name__)


class JWTBearer(HTTPBearer):
    """Extracts the raw bearer token from the ``Authorization`` header.

    Errors are raised as ``AuthError`` (401) rather than FastAPI's own
    ``HTTPException``, so every auth failure renders the same way.
    """

    def __init__(self):
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> str:
        if not request.headers.get("Authorization"):
            raise AuthError("Not authorized, no token")

        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or credentials.scheme.lower() != "bearer" or not credentials.credentials:
            raise AuthError("Not authorized, token failed")

        return credentials.credentials


bearer_scheme = JWTBearer()


async def get_current_user(
    request: Request,
    token: str = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> User:
    """Resolve the authenticated user and attach it to ``request.state``."""
    user = await AuthService(session, settings).resolve_token(token)
    request.state.user = user
    return user
