"""Typed actions accepted by the state reducer."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from ..utils.datetime import now_utc
from .filters import TaskFilters
from .preferences import PreferencesPatch
from .task import Task, TaskPatch


@dataclass(frozen=True)
class LoadTasks:
    """Replace the task collection wholesale and clear the loading flag."""

    tasks: Sequence[Task]

    def __post_init__(self) -> None:
        object.__setattr__(self, "tasks", tuple(self.tasks))


@dataclass(frozen=True)
class AddTask:
    """Append a fully materialized task."""

    task: Task


@dataclass(frozen=True)
class UpdateTask:
    """Apply a partial update to one task."""

    task_id: str
    patch: TaskPatch
    now: datetime = field(default_factory=now_utc)


@dataclass(frozen=True)
class DeleteTask:
    task_id: str


@dataclass(frozen=True)
class ToggleTaskStatus:
    """Advance a task to the next status in the cycle."""

    task_id: str
    now: datetime = field(default_factory=now_utc)


@dataclass(frozen=True)
class ReorderTasks:
    """Assign ``order`` from each ID's position in ``task_ids``."""

    task_ids: Sequence[str]

    def __post_init__(self) -> None:
        object.__setattr__(self, "task_ids", tuple(self.task_ids))


@dataclass(frozen=True)
class SetFilter:
    """Set a single filter field.

    The key and value are checked when the action is built so that applying
    it can never fail.
    """

    key: str
    value: Any

    def __post_init__(self) -> None:
        coerced = TaskFilters().with_value(self.key, self.value)
        object.__setattr__(self, "value", getattr(coerced, self.key))


@dataclass(frozen=True)
class ClearFilters:
    pass


@dataclass(frozen=True)
class ToggleTheme:
    pass


@dataclass(frozen=True)
class UpdatePreferences:
    patch: PreferencesPatch


@dataclass(frozen=True)
class SetLoading:
    loading: bool


Action = (
    LoadTasks
    | AddTask
    | UpdateTask
    | DeleteTask
    | ToggleTaskStatus
    | ReorderTasks
    | SetFilter
    | ClearFilters
    | ToggleTheme
    | UpdatePreferences
    | SetLoading
)
