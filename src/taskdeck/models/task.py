"""Task domain model."""

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.datetime import ensure_utc, from_iso, now_utc
from .enums import Category, Priority, TaskStatus

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


def normalize_tags(tags: Iterable[str]) -> tuple[str, ...]:
    """Lowercase and strip tags, dropping empties and duplicates (first wins)."""
    seen: set[str] = set()
    result: list[str] = []
    for tag in tags:
        value = str(tag).strip().lower()
        if value and value not in seen:
            seen.add(value)
            result.append(value)
    return tuple(result)


class Task(BaseModel):
    """Represents a single task.

    Instances are immutable snapshots; changes produce a new version via
    ``model_copy``.
    """

    model_config = ConfigDict(frozen=True)

    # Task identification
    id: str  # e.g., "comprar-ingredientes-para-la-cena-3f9a2c1b"

    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING
    priority: Priority = Priority.MEDIUM
    category: Category = Category.PERSONAL
    due_date: datetime | None = None
    created_at: datetime = Field(default_factory=now_utc)
    updated_at: datetime = Field(default_factory=now_utc)
    tags: tuple[str, ...] = ()
    assigned_to: str | None = None
    order: int = 0  # Position for manual ordering

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Keep tags lowercase and unique, preserving insertion order."""
        return normalize_tags(v)

    @field_validator("due_date", "created_at", "updated_at")
    @classmethod
    def validate_aware(cls, v: datetime | None) -> datetime | None:
        """Interpret naive datetimes as UTC."""
        if v is None:
            return None
        return ensure_utc(v)

    def is_overdue(self, now: datetime | None = None) -> bool:
        """Not completed and due strictly before ``now``."""
        if self.status == TaskStatus.COMPLETED or self.due_date is None:
            return False
        return self.due_date < (now or now_utc())

    def to_frontmatter(self) -> dict:
        """Convert to dict suitable for YAML front matter.

        The description is stored as the document body, not here.
        """
        data: dict = {
            "title": self.title,
            "status": self.status.value,
            "priority": self.priority.value,
            "category": self.category.value,
            "order": self.order,
        }
        if self.due_date:
            data["due_date"] = self.due_date.isoformat()
        data["created_at"] = self.created_at.isoformat()
        data["updated_at"] = self.updated_at.isoformat()
        if self.tags:
            data["tags"] = list(self.tags)
        if self.assigned_to:
            data["assigned_to"] = self.assigned_to
        return data

    @classmethod
    def from_frontmatter(cls, task_id: str, metadata: dict, body: str) -> "Task":
        """Create Task from parsed front matter."""
        created_at = _parse_datetime(metadata.get("created_at")) or now_utc()
        return cls(
            id=task_id,
            title=str(metadata.get("title") or task_id),
            description=body,
            status=metadata.get("status", TaskStatus.PENDING),
            priority=metadata.get("priority", Priority.MEDIUM),
            category=metadata.get("category", Category.PERSONAL),
            due_date=_parse_datetime(metadata.get("due_date")),
            created_at=created_at,
            updated_at=_parse_datetime(metadata.get("updated_at")) or created_at,
            tags=metadata.get("tags") or [],
            assigned_to=metadata.get("assigned_to") or None,
            order=int(metadata.get("order", 0)),
        )


class TaskCreate(BaseModel):
    """Data entered by the user for a new task.

    Priority and category fall back to the user's preferred defaults
    when left unset.
    """

    title: str
    description: str = ""
    priority: Priority | None = None
    category: Category | None = None
    due_date: datetime | None = None
    tags: tuple[str, ...] = ()
    assigned_to: str | None = None

    @field_validator("due_date")
    @classmethod
    def validate_aware(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None


class TaskPatch(BaseModel):
    """Partial update for a task.

    Only fields that were explicitly set are applied, so passing
    ``due_date=None`` clears the deadline while omitting it keeps it.
    """

    model_config = ConfigDict(frozen=True)

    title: str | None = None
    description: str | None = None
    status: TaskStatus | None = None
    priority: Priority | None = None
    category: Category | None = None
    due_date: datetime | None = None
    tags: tuple[str, ...] | None = None
    assigned_to: str | None = None
    order: int | None = None

    @field_validator("due_date")
    @classmethod
    def validate_aware(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v) if v is not None else None

    @field_validator("tags")
    @classmethod
    def validate_tags(cls, v: tuple[str, ...] | None) -> tuple[str, ...] | None:
        return normalize_tags(v) if v is not None else None

    def changes(self) -> dict[str, Any]:
        """Fields explicitly set on this patch.

        ``None`` only survives for fields a task may leave empty.
        """
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None or name in _NULLABLE_FIELDS
        }


_NULLABLE_FIELDS = frozenset({"due_date", "assigned_to"})


def _parse_datetime(value: str | datetime | None) -> datetime | None:
    """Parse datetime from string or pass through."""
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    return from_iso(value)
