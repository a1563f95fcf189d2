"""Note service implementation."""

import logging
from typing import List
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...exceptions import NotFoundError
from ..models.note import Note
from ..note_query import build_note_query, favorites_query
from ..repositories.note_repository import NoteRepository
from ..schemas.common import MessageResponse
from ..schemas.notes import (
    FavoriteToggleResponse,
    NoteCreate,
    NoteListParams,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from .interfaces import INoteService

logger = logging.getLogger(__name__)


class NoteService(INoteService):
    """Note service implementation.

    Notes that exist but belong to someone else are reported exactly like
    missing ones, so existence never leaks across users.
    """

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.note_repo = NoteRepository(session)

    async def create_note(self, user_id: UUID, request: NoteCreate) -> NoteResponse:
        """Create new note."""
        note = await self.note_repo.create_note(
            {
                "title": request.title,
                "content": request.content,
                "owner_id": user_id,
                "is_favorite": False,
            }
        )
        logger.info("User %s created note %s", user_id, note.id)
        return NoteResponse.model_validate(note)

    async def get_note(self, note_id: UUID, user_id: UUID) -> NoteResponse:
        """Get note by ID."""
        note = await self._get_owned_note(note_id, user_id)
        return NoteResponse.model_validate(note)

    async def update_note(self, note_id: UUID, user_id: UUID, request: NoteUpdate) -> NoteResponse:
        """Update existing note."""
        note = await self._get_owned_note(note_id, user_id)

        changes = request.changes()
        if changes:
            for key, value in changes.items():
                setattr(note, key, value)
            note = await self.note_repo.save(note)
            logger.info("User %s updated note %s", user_id, note_id)

        return NoteResponse.model_validate(note)

    async def delete_note(self, note_id: UUID, user_id: UUID) -> MessageResponse:
        """Delete note."""
        if not await self.note_repo.delete_note(note_id, user_id):
            raise NotFoundError("Note")

        logger.info("User %s deleted note %s", user_id, note_id)
        return MessageResponse(message="Note deleted")

    async def list_notes(self, user_id: UUID, params: NoteListParams) -> NoteListResponse:
        """List user notes with search, date filter, sorting and pagination."""
        query = build_note_query(
            user_id,
            params,
            default_limit=self.settings.default_page_size,
            max_limit=self.settings.max_page_size,
        )
        notes, total = await self.note_repo.list_notes(query)

        return NoteListResponse.create(
            notes=[NoteResponse.model_validate(note) for note in notes],
            total=total,
            page=query.page,
            limit=query.limit,
        )

    async def toggle_favorite(self, note_id: UUID, user_id: UUID) -> FavoriteToggleResponse:
        """Flip the favorite flag."""
        note = await self._get_owned_note(note_id, user_id)
        is_favorite = note.toggle_favorite()
        note = await self.note_repo.save(note)

        message = "Note marked as favorites" if is_favorite else "Note removed from favorites"
        return FavoriteToggleResponse(message=message, note=NoteResponse.model_validate(note))

    async def list_favorites(self, user_id: UUID) -> List[NoteResponse]:
        """Get all favorite notes."""
        notes = await self.note_repo.find_notes(favorites_query(user_id))
        return [NoteResponse.model_validate(note) for note in notes]

    async def _get_owned_note(self, note_id: UUID, user_id: UUID) -> Note:
        note = await self.note_repo.get_by_id_and_user(note_id, user_id)
        if not note:
            raise NotFoundError("Note")
        return note
