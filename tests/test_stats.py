"""Tests for task statistics."""

from datetime import UTC, datetime, timedelta

from taskdeck.models import Category, Priority, Task, TaskStatus
from taskdeck.sample_data import create_sample_tasks
from taskdeck.services import compute_stats

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)


class TestComputeStats:
    """Tests for compute_stats."""

    def test_empty(self):
        stats = compute_stats([], now=NOW)

        assert stats.total == 0
        assert stats.completion_rate == 0
        assert stats.by_category == dict.fromkeys(Category, 0)
        assert stats.by_priority == dict.fromkeys(Priority, 0)

    def test_overdue_and_completed(self):
        """A pending task due yesterday is overdue; a completed one is counted."""
        tasks = [
            Task(id="a", title="A", due_date=NOW - timedelta(days=1)),
            Task(id="b", title="B", status=TaskStatus.COMPLETED),
        ]

        stats = compute_stats(tasks, now=NOW)

        assert stats.total == 2
        assert stats.pending == 1
        assert stats.completed == 1
        assert stats.overdue == 1
        assert stats.completion_rate == 50

    def test_completed_never_overdue(self):
        tasks = [
            Task(
                id="a",
                title="A",
                status=TaskStatus.COMPLETED,
                due_date=NOW - timedelta(days=3),
            )
        ]
        assert compute_stats(tasks, now=NOW).overdue == 0

    def test_in_progress_can_be_overdue(self):
        tasks = [
            Task(
                id="a",
                title="A",
                status=TaskStatus.IN_PROGRESS,
                due_date=NOW - timedelta(hours=1),
            )
        ]

        stats = compute_stats(tasks, now=NOW)

        assert stats.in_progress == 1
        assert stats.overdue == 1

    def test_counts_add_up(self):
        """Status counts and grouped counts each sum to the total."""
        stats = compute_stats(create_sample_tasks(NOW), now=NOW)

        assert stats.total == 10
        assert stats.pending + stats.in_progress + stats.completed == stats.total
        assert sum(stats.by_category.values()) == stats.total
        assert sum(stats.by_priority.values()) == stats.total

    def test_sample_data(self):
        """The sample set has one overdue task and two completed."""
        stats = compute_stats(create_sample_tasks(NOW), now=NOW)

        assert stats.pending == 5
        assert stats.in_progress == 3
        assert stats.completed == 2
        assert stats.overdue == 1
        assert stats.completion_rate == 20
        assert stats.by_category[Category.WORK] == 4
        assert stats.by_category[Category.OTHER] == 0
        assert stats.by_priority[Priority.URGENT] == 2
