"""Service layer for business logic."""

from .filter_service import FilterService, filter_and_sort
from .reducer import reduce
from .stats_service import compute_stats
from .task_store import TaskStore
from .validation import validate_task_data

__all__ = [
    "FilterService",
    "TaskStore",
    "compute_stats",
    "filter_and_sort",
    "reduce",
    "validate_task_data",
]
