"""Security utilities."""

from .jwt import InvalidTokenError, TokenService
from .password import PasswordHasher

__all__ = [
    "PasswordHasher",
    "TokenService",
    "InvalidTokenError",
]
