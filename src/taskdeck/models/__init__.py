"""Data models."""

from .actions import (
    Action,
    AddTask,
    ClearFilters,
    DeleteTask,
    LoadTasks,
    ReorderTasks,
    SetFilter,
    SetLoading,
    ToggleTaskStatus,
    ToggleTheme,
    UpdatePreferences,
    UpdateTask,
)
from .enums import (
    ALL,
    PRIORITY_RANK,
    UNASSIGNED,
    Category,
    Priority,
    SortBy,
    SortOrder,
    TaskStatus,
    Theme,
)
from .filters import TaskFilters
from .preferences import PreferencesPatch, UserPreferences
from .state import AppState
from .stats import TaskStats
from .task import (
    DESCRIPTION_MAX_LENGTH,
    TITLE_MAX_LENGTH,
    Task,
    TaskCreate,
    TaskPatch,
)

__all__ = [
    "ALL",
    "DESCRIPTION_MAX_LENGTH",
    "PRIORITY_RANK",
    "TITLE_MAX_LENGTH",
    "UNASSIGNED",
    "Action",
    "AddTask",
    "AppState",
    "Category",
    "ClearFilters",
    "DeleteTask",
    "LoadTasks",
    "PreferencesPatch",
    "Priority",
    "ReorderTasks",
    "SetFilter",
    "SetLoading",
    "SortBy",
    "SortOrder",
    "Task",
    "TaskCreate",
    "TaskFilters",
    "TaskPatch",
    "TaskStats",
    "TaskStatus",
    "Theme",
    "ToggleTaskStatus",
    "ToggleTheme",
    "UpdatePreferences",
    "UpdateTask",
    "UserPreferences",
]
