"""Enums for task status, priority, category and view settings."""

from enum import Enum

# Filter sentinels
ALL = "all"
UNASSIGNED = "unassigned"


class TaskStatus(str, Enum):
    """Valid statuses for a task, in toggle order."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    def next(self) -> "TaskStatus":
        """Next status in the cycle pending -> in-progress -> completed -> pending."""
        members = list(TaskStatus)
        return members[(members.index(self) + 1) % len(members)]


class Priority(str, Enum):
    """Priority levels for tasks."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        """Sort rank, most urgent first."""
        return PRIORITY_RANK[self]


PRIORITY_RANK: dict[Priority, int] = {
    Priority.URGENT: 0,
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


class Category(str, Enum):
    """Predefined task categories."""

    WORK = "work"
    PERSONAL = "personal"
    SHOPPING = "shopping"
    HEALTH = "health"
    EDUCATION = "education"
    OTHER = "other"


class Theme(str, Enum):
    """Application theme."""

    LIGHT = "light"
    DARK = "dark"

    def toggled(self) -> "Theme":
        return Theme.DARK if self is Theme.LIGHT else Theme.LIGHT


class SortBy(str, Enum):
    """Keys the task list can be sorted by."""

    CREATED_AT = "createdAt"
    DUE_DATE = "dueDate"
    PRIORITY = "priority"
    TITLE = "title"
    ORDER = "order"


class SortOrder(str, Enum):
    """Sort direction."""

    ASC = "asc"
    DESC = "desc"
