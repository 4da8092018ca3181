"""Tests for sample data seeding."""

from datetime import UTC, datetime
from pathlib import Path

from taskdeck.models import Task
from taskdeck.repositories import FilesystemRepository, MemoryRepository
from taskdeck.sample_data import create_sample_tasks, seed_if_empty
from taskdeck.services.validation import validate_task_data

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)


class TestCreateSampleTasks:
    """Tests for create_sample_tasks."""

    def test_ten_tasks_in_order(self):
        tasks = create_sample_tasks(NOW)

        assert len(tasks) == 10
        assert [t.order for t in tasks] == list(range(10))
        assert tasks[0].title == "Revisar y responder emails importantes"

    def test_unique_ids(self):
        tasks = create_sample_tasks(NOW)
        assert len({t.id for t in tasks}) == 10

    def test_titles_and_descriptions_within_limits(self):
        """Sample text respects the title and description limits."""
        for task in create_sample_tasks(NOW):
            errors = validate_task_data(
                {"title": task.title, "description": task.description}, now=NOW
            )
            assert errors == []

    def test_dates_relative_to_now(self):
        overdue = [t for t in create_sample_tasks(NOW) if t.is_overdue(NOW)]
        assert [t.title for t in overdue] == ["Revisar facturas pendientes"]


class TestSeedIfEmpty:
    """Tests for seed_if_empty."""

    def test_seeds_empty_repository(self):
        repo = MemoryRepository()

        seeded = seed_if_empty(repo, NOW)

        assert seeded is not None
        assert repo.load_tasks() == seeded

    def test_skips_non_empty_repository(self):
        repo = MemoryRepository([Task(id="mine", title="Mine")])

        assert seed_if_empty(repo, NOW) is None
        assert [t.id for t in repo.load_tasks()] == ["mine"]

    def test_seeds_filesystem(self, tmp_path: Path):
        repo = FilesystemRepository(tmp_path)

        seed_if_empty(repo, NOW)

        assert len(repo.load_tasks()) == 10
        assert len(list((tmp_path / "tasks").glob("*.md"))) == 10
