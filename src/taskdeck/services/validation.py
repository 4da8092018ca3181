"""Validation rules for task input."""

from collections.abc import Mapping
from datetime import datetime
from typing import Any

from pydantic import BaseModel

from ..models.task import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from ..utils.datetime import ensure_utc, from_iso, now_utc

TITLE_REQUIRED = "Title is required"
TITLE_TOO_LONG = f"Title cannot exceed {TITLE_MAX_LENGTH} characters"
DESCRIPTION_TOO_LONG = f"Description cannot exceed {DESCRIPTION_MAX_LENGTH} characters"
DUE_DATE_IN_PAST = "Due date cannot be in the past"
DUE_DATE_INVALID = "Due date is not a valid date"


def validate_task_data(
    data: Mapping[str, Any] | BaseModel,
    now: datetime | None = None,
) -> list[str]:
    """
    Check task fields against the input rules.

    Every violated rule is reported, not just the first. Only title,
    description and due_date are inspected; other keys are ignored.
    Non-string text is read as its string form and a due date may be
    a datetime or an ISO 8601 string.

    Args:
        data: Candidate task fields, as a mapping or a model
        now: Reference time for the due date rule (default: current UTC time)

    Returns:
        List of error messages, empty when the data is valid.
    """
    if isinstance(data, BaseModel):
        data = data.model_dump()

    errors: list[str] = []
    title = _text(data.get("title"))
    description = _text(data.get("description"))

    if not title.strip():
        errors.append(TITLE_REQUIRED)

    if len(title) > TITLE_MAX_LENGTH:
        errors.append(TITLE_TOO_LONG)

    if len(description) > DESCRIPTION_MAX_LENGTH:
        errors.append(DESCRIPTION_TOO_LONG)

    due_date = data.get("due_date")
    if due_date is not None and due_date != "":
        try:
            due = _as_datetime(due_date)
        except (TypeError, ValueError):
            errors.append(DUE_DATE_INVALID)
        else:
            if due < (now or now_utc()):
                errors.append(DUE_DATE_IN_PAST)

    return errors


def _text(value: Any) -> str:
    """Read a text field, treating a missing value as empty."""
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, str):
        return from_iso(value.strip())
    raise TypeError(f"Not a date: {value!r}")
