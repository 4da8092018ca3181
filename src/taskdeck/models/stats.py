"""Aggregate task statistics."""

import math

from pydantic import BaseModel, Field

from .enums import Category, Priority


def _zero_categories() -> dict[Category, int]:
    return dict.fromkeys(Category, 0)


def _zero_priorities() -> dict[Priority, int]:
    return dict.fromkeys(Priority, 0)


class TaskStats(BaseModel):
    """Summary counts over a task collection."""

    total: int = 0
    pending: int = 0
    in_progress: int = 0
    completed: int = 0
    overdue: int = 0
    by_category: dict[Category, int] = Field(default_factory=_zero_categories)
    by_priority: dict[Priority, int] = Field(default_factory=_zero_priorities)

    @property
    def completion_rate(self) -> int:
        """Completed tasks as a rounded percentage of the total."""
        if self.total == 0:
            return 0
        # Half-up rounding, not banker's rounding
        return math.floor(self.completed * 100 / self.total + 0.5)
