"""
Service interfaces for the NoteKeeper application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..models.user import User
from ..schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from ..schemas.common import HealthCheckResponse, MessageResponse
from ..schemas.notes import (
    FavoriteToggleResponse,
    NoteCreate,
    NoteListParams,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)


class IAuthService(ABC):
    """Auth service for registration, login and token resolution."""

    @abstractmethod
    async def register_user(self, request: RegisterRequest) -> AuthResponse:
        """Register new user and issue a token."""
        pass

    @abstractmethod
    async def authenticate_user(self, request: LoginRequest) -> AuthResponse:
        """Check credentials and issue a token."""
        pass

    @abstractmethod
    async def resolve_token(self, token: str) -> User:
        """Verify a bearer token and load the user it was issued for."""
        pass


class INoteService(ABC):
    """Note service for owner-scoped CRUD, favorites and listing."""

    @abstractmethod
    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> MessageResponse:
        """Delete note."""
        pass

    @abstractmethod
    async def list_notes(self, user_id: UUID, params: NoteListParams) -> NoteListResponse:
        """Search, filter, sort and paginate the user's notes."""
        pass

    @abstractmethod
    async def toggle_favorite(self, note_id: UUID, user_id: UUID) -> FavoriteToggleResponse:
        """Flip the favorite flag of a note."""
        pass

    @abstractmethod
    async def list_favorites(self, user_id: UUID) -> List[NoteResponse]:
        """All favorite notes of the user."""
        pass


class IHealthService(ABC):
    """Health monitoring service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get overall system health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check database connectivity."""
        pass
