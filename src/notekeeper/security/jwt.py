"""JWT token utilities."""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt

from ..config import Settings

TOKEN_TYPE = "access"


class InvalidTokenError(Exception):
    """Token is malformed, tampered with, expired or has unusable claims."""


class TokenService:
    """Issues and verifies signed identity tokens.

    Tokens are stateless: there is no refresh, rotation or revocation, and
    expiry is absolute from the moment of issuance.
    """

    def __init__(self, settings: Settings):
        self.secret_key = settings.secret_key
        self.algorithm = settings.algorithm
        self.lifetime = timedelta(days=settings.access_token_expire_days)

    def issue(self, user_id: UUID, now: Optional[datetime] = None) -> str:
        """Create a signed token for ``user_id``."""
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.lifetime).timestamp()),
            "type": TOKEN_TYPE,
        }
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def decode(self, token: str) -> Dict[str, Any]:
        """Decode and validate signature and expiry, returning the claims."""
        try:
            return jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except JWTError as exc:
            raise InvalidTokenError(str(exc)) from exc

    def verify(self, token: str) -> UUID:
        """Return the user id the token was issued for."""
        payload = self.decode(token)

        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError("Unexpected token type")

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError("Token has no subject")

        try:
            return UUID(subject)
        except (TypeError, ValueError) as exc:
            raise InvalidTokenError("Token subject is not a user id") from exc
