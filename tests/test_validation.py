"""Tests for task input validation."""

from datetime import UTC, datetime, timedelta

from taskdeck.models import TaskCreate
from taskdeck.services.validation import (
    DESCRIPTION_TOO_LONG,
    DUE_DATE_IN_PAST,
    DUE_DATE_INVALID,
    TITLE_REQUIRED,
    TITLE_TOO_LONG,
    validate_task_data,
)

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)


class TestValidateTaskData:
    """Tests for validate_task_data."""

    def test_valid_data(self):
        """Valid input produces no errors."""
        data = {"title": "Buy bread", "due_date": NOW + timedelta(days=1)}
        assert validate_task_data(data, now=NOW) == []

    def test_empty_title(self):
        assert validate_task_data({"title": ""}, now=NOW) == [TITLE_REQUIRED]

    def test_whitespace_title(self):
        """A title of only whitespace counts as missing."""
        assert validate_task_data({"title": "   \t"}, now=NOW) == [TITLE_REQUIRED]

    def test_missing_title(self):
        assert validate_task_data({}, now=NOW) == [TITLE_REQUIRED]

    def test_title_at_limit(self):
        """100 characters is allowed."""
        assert validate_task_data({"title": "x" * 100}, now=NOW) == []

    def test_title_too_long(self):
        assert validate_task_data({"title": "x" * 101}, now=NOW) == [TITLE_TOO_LONG]

    def test_description_at_limit(self):
        data = {"title": "ok", "description": "d" * 500}
        assert validate_task_data(data, now=NOW) == []

    def test_description_too_long(self):
        data = {"title": "ok", "description": "d" * 501}
        assert validate_task_data(data, now=NOW) == [DESCRIPTION_TOO_LONG]

    def test_due_date_in_past(self):
        data = {"title": "ok", "due_date": NOW - timedelta(seconds=1)}
        assert validate_task_data(data, now=NOW) == [DUE_DATE_IN_PAST]

    def test_due_date_now_is_allowed(self):
        """Only due dates strictly before now are rejected."""
        data = {"title": "ok", "due_date": NOW}
        assert validate_task_data(data, now=NOW) == []

    def test_no_due_date(self):
        data = {"title": "ok", "due_date": None}
        assert validate_task_data(data, now=NOW) == []

    def test_all_errors_reported(self):
        """Every violated rule is reported, not just the first."""
        data = {
            "title": "",
            "description": "d" * 501,
            "due_date": NOW - timedelta(days=1),
        }

        errors = validate_task_data(data, now=NOW)

        assert errors == [TITLE_REQUIRED, DESCRIPTION_TOO_LONG, DUE_DATE_IN_PAST]

    def test_accepts_model(self):
        """Models are validated the same way as mappings."""
        data = TaskCreate(title=" ", due_date=NOW - timedelta(days=1))

        errors = validate_task_data(data, now=NOW)

        assert errors == [TITLE_REQUIRED, DUE_DATE_IN_PAST]

    def test_naive_due_date_treated_as_utc(self):
        data = {"title": "ok", "due_date": datetime(2030, 6, 1, 11, 0)}
        assert validate_task_data(data, now=NOW) == [DUE_DATE_IN_PAST]

    def test_non_string_title_read_as_text(self):
        """Numbers are read as their string form instead of raising."""
        assert validate_task_data({"title": 123}, now=NOW) == []
        assert validate_task_data({"title": 10**101}, now=NOW) == [TITLE_TOO_LONG]

    def test_none_fields_are_empty(self):
        data = {"title": None, "description": None}
        assert validate_task_data(data, now=NOW) == [TITLE_REQUIRED]

    def test_iso_string_due_date(self):
        """ISO 8601 strings are compared like datetimes."""
        assert validate_task_data(
            {"title": "ok", "due_date": "2030-05-31T12:00:00Z"}, now=NOW
        ) == [DUE_DATE_IN_PAST]
        assert validate_task_data(
            {"title": "ok", "due_date": "2030-06-02T09:00:00+02:00"}, now=NOW
        ) == []

    def test_unparseable_due_date(self):
        data = {"title": "", "due_date": "next tuesday-ish"}
        assert validate_task_data(data, now=NOW) == [TITLE_REQUIRED, DUE_DATE_INVALID]

    def test_due_date_of_wrong_type(self):
        assert validate_task_data({"title": "ok", "due_date": 42}, now=NOW) == [
            DUE_DATE_INVALID
        ]

    def test_empty_due_date_string_means_none(self):
        assert validate_task_data({"title": "ok", "due_date": ""}, now=NOW) == []

    def test_messages(self):
        """Messages are stable user-facing text."""
        assert TITLE_REQUIRED == "Title is required"
        assert TITLE_TOO_LONG == "Title cannot exceed 100 characters"
        assert DESCRIPTION_TOO_LONG == "Description cannot exceed 500 characters"
        assert DUE_DATE_IN_PAST == "Due date cannot be in the past"
        assert DUE_DATE_INVALID == "Due date is not a valid date"
