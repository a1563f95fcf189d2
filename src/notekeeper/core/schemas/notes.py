"""
Note management schemas.

These schemas define the API contracts for note CRUD operations, the
favorite toggle and the filtered/paginated listing.
"""

import math
import uuid
from datetime import datetime
from typing import List, Optional

from pydantic import Field, field_validator

from .common import CamelModel


def _reject_blank(v: Optional[str], label: str) -> Optional[str]:
    if v is not None and len(v.strip()) == 0:
        raise ValueError(f"{label} cannot be empty")
    return v


class NoteCreate(CamelModel):
    """Note creation request schema."""

    title: str = Field(min_length=1, max_length=100, description="Note title")
    content: str = Field(min_length=1, description="Note content")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _reject_blank(v, "Title")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _reject_blank(v, "Content")


class NoteUpdate(CamelModel):
    """Partial note update. Only supplied fields are written."""

    title: Optional[str] = Field(default=None, min_length=1, max_length=100)
    content: Optional[str] = Field(default=None, min_length=1)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v):
        return _reject_blank(v, "Title")

    @field_validator("content")
    @classmethod
    def validate_content(cls, v):
        return _reject_blank(v, "Content")

    def changes(self) -> dict:
        """Fields the client actually sent, ready for the repository."""
        return self.model_dump(exclude_none=True)


class NoteResponse(CamelModel):
    """Note response schema."""

    id: uuid.UUID = Field(description="Note unique identifier")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    owner_id: uuid.UUID = Field(description="Note owner ID")
    is_favorite: bool = Field(description="Whether the note is marked as favorite")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")


class NoteListParams(CamelModel):
    """Raw listing parameters, exactly as received on the query string.

    Coercion and validation happen in ``core.note_query`` so that bad
    paging values can fall back to defaults instead of failing the request.
    """

    search: Optional[str] = None
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    page: Optional[str] = None
    limit: Optional[str] = None
    sort_by: Optional[str] = None
    order: Optional[str] = None


class NoteListResponse(CamelModel):
    """One page of the filtered, sorted note listing."""

    total: int = Field(description="Number of notes matching the filters")
    page: int = Field(description="Current page (1-based)")
    total_pages: int = Field(description="ceil(total / limit)")
    notes: List[NoteResponse]

    @classmethod
    def create(
        cls, notes: List[NoteResponse], total: int, page: int, limit: int
    ) -> "NoteListResponse":
        return cls(
            total=total,
            page=page,
            total_pages=math.ceil(total / limit) if limit else 0,
            notes=notes,
        )


class FavoriteToggleResponse(CamelModel):
    """Result of flipping a note's favorite flag."""

    message: str
    note: NoteResponse
