"""Unit tests for turning listing parameters into a NoteQuery."""

import uuid
from datetime import datetime, time, timezone

import pytest

from notekeeper.core.note_query import (
    DEFAULT_LIMIT,
    MAX_OFFSET,
    NoteQuery,
    build_note_query,
    coerce_positive_int,
    favorites_query,
    parse_date_bound,
    resolve_sort,
)
from notekeeper.core.schemas.notes import NoteListParams
from notekeeper.exceptions import ValidationError

OWNER = uuid.uuid4()


@pytest.mark.parametrize(
    "raw,expected",
    [
        (None, 7),
        ("3", 3),
        (" 12 ", 12),
        ("0", 7),
        ("-2", 7),
        ("abc", 7),
        ("2.5", 7),
        ("", 7),
    ],
)
def test_coerce_positive_int(raw, expected):
    assert coerce_positive_int(raw, 7) == expected


class TestParseDateBound:
    def test_missing_or_blank_is_none(self):
        assert parse_date_bound(None, "fromDate") is None
        assert parse_date_bound("  ", "fromDate") is None

    def test_date_starts_at_midnight_utc(self):
        bound = parse_date_bound("2024-06-15", "fromDate")
        assert bound == datetime(2024, 6, 15, tzinfo=timezone.utc)

    def test_date_as_upper_bound_covers_whole_day(self):
        bound = parse_date_bound("2024-06-15", "toDate", end_of_day=True)
        assert bound == datetime.combine(datetime(2024, 6, 15).date(), time.max, tzinfo=timezone.utc)

    def test_datetime_with_zulu_suffix(self):
        bound = parse_date_bound("2024-06-15T08:30:00Z", "fromDate")
        assert bound == datetime(2024, 6, 15, 8, 30, tzinfo=timezone.utc)

    def test_naive_datetime_is_utc(self):
        bound = parse_date_bound("2024-06-15T08:30:00", "fromDate")
        assert bound.tzinfo is not None
        assert bound == datetime(2024, 6, 15, 8, 30, tzinfo=timezone.utc)

    def test_offset_is_normalized_to_utc(self):
        bound = parse_date_bound("2024-06-15T10:00:00+02:00", "fromDate")
        assert bound == datetime(2024, 6, 15, 8, 0, tzinfo=timezone.utc)

    def test_garbage_raises_validation_error(self):
        with pytest.raises(ValidationError) as excinfo:
            parse_date_bound("15/06/2024", "fromDate")
        assert excinfo.value.status_code == 400
        assert "fromDate" in excinfo.value.message

    @pytest.mark.parametrize("raw", ["9999-12-31T23:00:00-05:00", "0001-01-01T01:00:00+05:00"])
    def test_offset_past_calendar_edge_is_validation_error(self, raw):
        with pytest.raises(ValidationError) as excinfo:
            parse_date_bound(raw, "toDate", end_of_day=True)
        assert excinfo.value.message == "toDate must be an ISO date (YYYY-MM-DD) or datetime"


class TestResolveSort:
    def test_defaults_to_newest_first(self):
        assert resolve_sort(None, None) == ("created_at", True)

    def test_camel_and_snake_spellings(self):
        assert resolve_sort("updatedAt", "asc") == ("updated_at", False)
        assert resolve_sort("updated_at", "desc") == ("updated_at", True)
        assert resolve_sort("title", "ASC") == ("title", False)

    def test_unknown_field_falls_back(self):
        assert resolve_sort("owner_id", "asc") == ("created_at", False)

    def test_unknown_order_sorts_descending(self):
        assert resolve_sort("title", "sideways") == ("title", True)


class TestBuildNoteQuery:
    def test_defaults(self):
        query = build_note_query(OWNER, NoteListParams())
        assert query == NoteQuery(owner_id=OWNER)
        assert query.page == 1
        assert query.limit == DEFAULT_LIMIT
        assert query.offset == 0

    def test_all_parameters(self):
        params = NoteListParams(
            search="  meeting ",
            from_date="2024-06-01",
            to_date="2024-06-30",
            page="3",
            limit="4",
            sort_by="title",
            order="asc",
        )
        query = build_note_query(OWNER, params)

        assert query.owner_id == OWNER
        assert query.search == "meeting"
        assert query.created_from == datetime(2024, 6, 1, tzinfo=timezone.utc)
        assert query.created_to.date() == datetime(2024, 6, 30).date()
        assert query.sort_field == "title"
        assert query.descending is False
        assert query.page == 3
        assert query.limit == 4
        assert query.offset == 8

    def test_blank_search_is_ignored(self):
        assert build_note_query(OWNER, NoteListParams(search="   ")).search is None

    def test_limit_is_capped(self):
        query = build_note_query(OWNER, NoteListParams(limit="1000"), max_limit=100)
        assert query.limit == 100

    def test_bad_paging_falls_back(self):
        query = build_note_query(OWNER, NoteListParams(page="zero", limit="-1"), default_limit=9)
        assert query.page == 1
        assert query.limit == 9

    def test_huge_page_keeps_offset_in_64_bit_range(self):
        query = build_note_query(OWNER, NoteListParams(page="99999999999999999999", limit="5"))
        assert query.limit == 5
        assert query.offset <= MAX_OFFSET
        assert query.page > 1

    def test_same_day_range_is_allowed(self):
        query = build_note_query(OWNER, NoteListParams(from_date="2024-06-15", to_date="2024-06-15"))
        assert query.created_from < query.created_to

    def test_inverted_range_rejected(self):
        with pytest.raises(ValidationError) as excinfo:
            build_note_query(OWNER, NoteListParams(from_date="2024-07-01", to_date="2024-06-01"))
        assert excinfo.value.message == "fromDate must not be later than toDate"


def test_favorites_query_is_unpaginated():
    query = favorites_query(OWNER)
    assert query.favorites_only is True
    assert query.limit is None
    assert query.offset == 0
    assert query.sort_field == "created_at" and query.descending is True
