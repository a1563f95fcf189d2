"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, bearer_scheme, get_current_user

__all__ = ["get_current_user", "bearer_scheme", "JWTBearer"]
