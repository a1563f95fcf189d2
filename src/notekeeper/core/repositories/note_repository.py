"""Note repository for database operations."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models.note import Note
from ..note_query import NoteQuery


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so ``term`` matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class NoteRepository:
    """Repository for note database operations.

    Every read and write is scoped to the owning user.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_note(self, note_data: dict) -> Note:
        """Create new note."""
        note = Note(**note_data)
        self.session.add(note)
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        stmt = select(Note).where(and_(Note.id == note_id, Note.owner_id == user_id))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def save(self, note: Note) -> Note:
        """Persist pending changes on an already loaded note."""
        await self.session.commit()
        await self.session.refresh(note)
        return note

    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note if owned by user."""
        note = await self.get_by_id_and_user(note_id, user_id)
        if not note:
            return False

        await self.session.delete(note)
        await self.session.commit()
        return True

    def _where(self, query: NoteQuery) -> list:
        """Translate the query's filters into SQL clauses, ANDed by the caller."""
        clauses = [Note.owner_id == query.owner_id]

        if query.search:
            pattern = f"%{escape_like(query.search)}%"
            clauses.append(
                or_(
                    Note.title.ilike(pattern, escape="\\"),
                    Note.content.ilike(pattern, escape="\\"),
                )
            )
        if query.created_from is not None:
            clauses.append(Note.created_at >= query.created_from)
        if query.created_to is not None:
            clauses.append(Note.created_at <= query.created_to)
        if query.favorites_only:
            clauses.append(Note.is_favorite.is_(True))

        return clauses

    def _order_by(self, query: NoteQuery) -> list:
        column = getattr(Note, query.sort_field)
        # id breaks ties so paging is deterministic
        return [column.desc() if query.descending else column.asc(), Note.id.asc()]

    async def count_notes(self, query: NoteQuery) -> int:
        """Count every note matching the query's filters."""
        stmt = select(func.count()).select_from(Note).where(*self._where(query))
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def find_notes(self, query: NoteQuery) -> List[Note]:
        """Fetch the sorted window of notes matching the query."""
        stmt = select(Note).where(*self._where(query)).order_by(*self._order_by(query))
        if query.limit is not None:
            stmt = stmt.offset(query.offset).limit(query.limit)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_notes(self, query: NoteQuery) -> tuple[List[Note], int]:
        """Return the requested page and the total number of matches."""
        total = await self.count_notes(query)
        notes = await self.find_notes(query)
        return notes, total
