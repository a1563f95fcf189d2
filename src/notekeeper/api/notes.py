"""Notes API endpoints."""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings
from ..dependencies import get_app_settings
from ..core.models.user import User
from ..core.schemas.common import MessageResponse
from ..core.schemas.notes import (
    FavoriteToggleResponse,
    NoteCreate,
    NoteListParams,
    NoteListResponse,
    NoteResponse,
    NoteUpdate,
)
from ..core.services import NoteService
from ..database import get_db_session
from ..middleware.auth import get_current_user

router = APIRouter(prefix="/notes", tags=["notes"])


def get_note_service(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_app_settings),
) -> NoteService:
    return NoteService(session, settings)


@router.post("", response_model=NoteResponse, status_code=status.HTTP_201_CREATED)
async def create_note(
    request: NoteCreate,
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Create a new note."""
    return await note_service.create_note(current_user.id, request)


@router.get("", response_model=NoteListResponse)
async def list_notes(
    search: Optional[str] = Query(None, description="Case-insensitive text in title or content"),
    from_date: Optional[str] = Query(None, alias="fromDate", description="Created on/after (ISO date)"),
    to_date: Optional[str] = Query(None, alias="toDate", description="Created on/before (ISO date)"),
    page: Optional[str] = Query(None, description="1-based page number, default 1"),
    limit: Optional[str] = Query(None, description="Page size, default 5"),
    sort_by: Optional[str] = Query(None, alias="sortBy", description="createdAt, updatedAt, title, ..."),
    order: Optional[str] = Query(None, description="asc or desc (default)"),
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """List user notes with search, date range, sorting and pagination."""
    params = NoteListParams(
        search=search,
        from_date=from_date,
        to_date=to_date,
        page=page,
        limit=limit,
        sort_by=sort_by,
        order=order,
    )
    return await note_service.list_notes(current_user.id, params)


# declared before /{note_id} so "favorites" is not parsed as an id
@router.get("/favorites", response_model=List[NoteResponse])
async def list_favorites(
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Get all favorite notes."""
    return await note_service.list_favorites(current_user.id)


@router.get("/{note_id}", response_model=NoteResponse)
async def get_note(
    note_id: UUID,
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Get a specific note."""
    return await note_service.get_note(note_id, current_user.id)


@router.put("/{note_id}", response_model=NoteResponse)
async def update_note(
    note_id: UUID,
    request: NoteUpdate,
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Update a note."""
    return await note_service.update_note(note_id, current_user.id, request)


@router.delete("/{note_id}", response_model=MessageResponse)
async def delete_note(
    note_id: UUID,
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Delete a note."""
    return await note_service.delete_note(note_id, current_user.id)


@router.put("/{note_id}/favorite", response_model=FavoriteToggleResponse)
async def toggle_favorite(
    note_id: UUID,
    current_user: User = Depends(get_current_user),
    note_service: NoteService = Depends(get_note_service),
):
    """Toggle the favorite flag of a note."""
    return await note_service.toggle_favorite(note_id, current_user.id)
