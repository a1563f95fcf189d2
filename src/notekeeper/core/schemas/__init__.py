"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from .common import CamelModel, ErrorResponse, HealthCheckResponse, MessageResponse
from .notes import (
    FavoriteToggleResponse,
    NoteCreate,
    NoteListParams,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)

__all__ = [
    # Auth schemas
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "NoteListParams",
    "NoteListResponse",
    "FavoriteToggleResponse",
    # Common schemas
    "CamelModel",
    "MessageResponse",
    "ErrorResponse",
    "HealthCheckResponse",
]
