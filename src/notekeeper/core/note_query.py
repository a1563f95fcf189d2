"""Note listing query builder.

Turns the raw ``GET /notes`` query string into a typed ``NoteQuery`` that the
repository translates to SQL. Rules:

- owner scoping is always present and cannot be switched off
- ``page``/``limit`` that are missing, non-numeric or non-positive fall back
  to their defaults; ``limit`` is capped at the configured maximum and
  ``page`` so that the offset fits a 64-bit integer
- ``fromDate``/``toDate`` are inclusive; a bare date for ``toDate`` covers
  the whole day (UTC); unparsable dates are a client error
- unknown ``sortBy`` values fall back to creation time, any ``order`` other
  than ``asc`` sorts descending
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Optional
from uuid import UUID

from ..exceptions import ValidationError
from .schemas.notes import NoteListParams

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 5
DEFAULT_SORT_FIELD = "created_at"
MAX_OFFSET = 2**63 - 1

# accepted sortBy spellings -> Note column name
SORTABLE_FIELDS = {
    "createdAt": "created_at",
    "created_at": "created_at",
    "updatedAt": "updated_at",
    "updated_at": "updated_at",
    "title": "title",
    "content": "content",
    "isFavorite": "is_favorite",
    "is_favorite": "is_favorite",
}


@dataclass(frozen=True)
class NoteQuery:
    """Filter, sort and window over one user's notes."""

    owner_id: UUID
    search: Optional[str] = None
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None
    favorites_only: bool = False
    sort_field: str = DEFAULT_SORT_FIELD
    descending: bool = True
    page: int = DEFAULT_PAGE
    limit: Optional[int] = DEFAULT_LIMIT  # None -> no window

    @property
    def offset(self) -> int:
        if self.limit is None:
            return 0
        return (self.page - 1) * self.limit


def coerce_positive_int(raw: Optional[str], default: int) -> int:
    """Parse a positive integer, falling back to ``default`` on anything else."""
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value > 0 else default


def parse_date_bound(raw: Optional[str], field: str, end_of_day: bool = False) -> Optional[datetime]:
    """Parse an ISO date or datetime into an aware UTC datetime.

    A date without a time starts at midnight, or ends at the last microsecond
    of the day when ``end_of_day`` is set.
    """
    if raw is None or not raw.strip():
        return None
    value = raw.strip()

    try:
        day = date.fromisoformat(value)
    except ValueError:
        day = None

    if day is not None:
        clock = time.max if end_of_day else time.min
        return datetime.combine(day, clock, tzinfo=timezone.utc)

    if value.endswith(("Z", "z")):
        value = value[:-1] + "+00:00"
    try:
        moment = datetime.fromisoformat(value)
    except ValueError:
        raise ValidationError(
            f"{field} must be an ISO date (YYYY-MM-DD) or datetime", field=field
        ) from None

    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    try:
        return moment.astimezone(timezone.utc)
    except OverflowError:
        # offset pushes the instant past year 1 or 9999
        raise ValidationError(
            f"{field} must be an ISO date (YYYY-MM-DD) or datetime", field=field
        ) from None


def resolve_sort(sort_by: Optional[str], order: Optional[str]) -> tuple[str, bool]:
    """Return ``(column, descending)`` for the requested sort."""
    column = SORTABLE_FIELDS.get((sort_by or "").strip(), DEFAULT_SORT_FIELD)
    descending = (order or "").strip().lower() != "asc"
    return column, descending


def build_note_query(
    owner_id: UUID,
    params: NoteListParams,
    default_limit: int = DEFAULT_LIMIT,
    max_limit: int = 100,
) -> NoteQuery:
    """Build the listing query for ``owner_id`` from raw request parameters."""
    search = (params.search or "").strip() or None

    created_from = parse_date_bound(params.from_date, "fromDate")
    created_to = parse_date_bound(params.to_date, "toDate", end_of_day=True)
    if created_from and created_to and created_from > created_to:
        raise ValidationError("fromDate must not be later than toDate", field="fromDate")

    limit = min(coerce_positive_int(params.limit, default_limit), max_limit)
    # clamp so the offset fits a signed 64-bit SQL integer; such pages are empty anyway
    page = min(coerce_positive_int(params.page, DEFAULT_PAGE), MAX_OFFSET // limit + 1)
    sort_field, descending = resolve_sort(params.sort_by, params.order)

    return NoteQuery(
        owner_id=owner_id,
        search=search,
        created_from=created_from,
        created_to=created_to,
        sort_field=sort_field,
        descending=descending,
        page=page,
        limit=limit,
    )


def favorites_query(owner_id: UUID) -> NoteQuery:
    """All favorite notes of ``owner_id``, newest first, unpaginated."""
    return NoteQuery(owner_id=owner_id, favorites_only=True, limit=None)
