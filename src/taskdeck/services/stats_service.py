"""Statistics over a task collection."""

from collections.abc import Iterable
from datetime import datetime

from ..models import Task, TaskStats, TaskStatus
from ..utils.datetime import now_utc


def compute_stats(tasks: Iterable[Task], now: datetime | None = None) -> TaskStats:
    """
    Count tasks by status, category and priority in a single pass.

    A task is overdue when it is not completed and its due date is strictly
    before ``now``. Every category and priority appears in the result, with
    zero when no task has it.
    """
    now = now or now_utc()
    stats = TaskStats()

    for task in tasks:
        stats.total += 1

        if task.status == TaskStatus.PENDING:
            stats.pending += 1
        elif task.status == TaskStatus.IN_PROGRESS:
            stats.in_progress += 1
        elif task.status == TaskStatus.COMPLETED:
            stats.completed += 1

        if task.is_overdue(now):
            stats.overdue += 1

        stats.by_category[task.category] += 1
        stats.by_priority[task.priority] += 1

    return stats
