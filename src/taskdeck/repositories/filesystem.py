"""Filesystem-based repository for task storage."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from datetime import datetime
from pathlib import Path

import frontmatter
import yaml
from pydantic import ValidationError

from ..errors import StorageError
from ..models import Task, UserPreferences

logger = logging.getLogger(__name__)


class FilesystemRepository:
    """
    Repository for tasks stored on the filesystem.

    Each task is a .md file with YAML front matter; the description is the
    markdown body. Collection order is kept in tasks/tasks.yaml and
    preferences in preferences.yaml.

    Layout:
        <storage_root>/preferences.yaml
        <storage_root>/tasks/tasks.yaml
        <storage_root>/tasks/<task-id>.md
    """

    TASKS_DIR = "tasks"
    INDEX_FILE = "tasks.yaml"
    PREFERENCES_FILE = "preferences.yaml"

    def __init__(self, storage_root: Path) -> None:
        """
        Initialize repository.

        Args:
            storage_root: Path to the data directory (e.g., .taskdeck/)
        """
        self.storage_root = storage_root
        self.task_root = storage_root / self.TASKS_DIR

    def ensure_directory(self) -> None:
        """Create the tasks directory if it doesn't exist."""
        self.task_root.mkdir(parents=True, exist_ok=True)

    # --- Task Operations ---

    def load_tasks(self) -> list[Task]:
        """Load all tasks, in saved collection order."""
        if not self.task_root.is_dir():
            return []

        tasks: dict[str, Task] = {}
        for filepath in self._iter_task_files():
            task = self._parse_task_file(filepath)
            if task:
                tasks[task.id] = task

        return self._ordered(tasks, self._load_index())

    def save_tasks(self, tasks: list[Task]) -> None:
        """
        Write the full collection to disk.

        Rewrites every task file and the index, and removes files for tasks
        that are no longer in the collection. Failures are logged, not raised.
        """
        try:
            self._write_tasks(tasks)
        except StorageError:
            logger.exception("Failed to save %d tasks to %s", len(tasks), self.task_root)

    def get_filepath(self, task_id: str) -> Path:
        """Get the filesystem path for a task ID."""
        if not task_id or "/" in task_id or "\\" in task_id or task_id.startswith("."):
            raise StorageError(f"Task ID cannot be used as a filename: {task_id!r}")
        return self.task_root / f"{task_id}.md"

    # --- Preference Operations ---

    def load_preferences(self) -> UserPreferences:
        """Load preferences.yaml, falling back to defaults."""
        path = self.storage_root / self.PREFERENCES_FILE
        if not path.exists():
            logger.debug("No %s found, using defaults", self.PREFERENCES_FILE)
            return UserPreferences()

        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return UserPreferences()

        if not isinstance(data, dict):
            logger.warning("%s is empty or malformed, using defaults", path)
            return UserPreferences()

        try:
            return UserPreferences(**data)
        except ValidationError as e:
            logger.warning("Invalid preferences in %s: %s", path, e)
            return UserPreferences()

    def save_preferences(self, preferences: UserPreferences) -> None:
        """Write preferences.yaml. Failures are logged, not raised."""
        path = self.storage_root / self.PREFERENCES_FILE
        try:
            self.storage_root.mkdir(parents=True, exist_ok=True)
            with path.open("w", encoding="utf-8") as f:
                yaml.safe_dump(
                    preferences.model_dump(mode="json"),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                )
        except (OSError, yaml.YAMLError):
            logger.exception("Failed to save preferences to %s", path)

    # --- Private Methods ---

    def _iter_task_files(self) -> Iterator[Path]:
        """Iterate over all .md files in the task root."""
        yield from self.task_root.glob("*.md")

    def _parse_task_file(self, filepath: Path) -> Task | None:
        """Parse a single task file, or None if it can't be read."""
        try:
            post = frontmatter.load(filepath)
            return Task.from_frontmatter(
                task_id=filepath.stem,
                metadata=post.metadata,
                body=post.content,
            )
        except (OSError, yaml.YAMLError, ValidationError, ValueError, TypeError) as e:
            logger.warning("Skipping unreadable task file %s: %s", filepath.name, e)
            return None

    def _load_index(self) -> list[str]:
        """Read task IDs from tasks.yaml in collection order."""
        path = self.task_root / self.INDEX_FILE
        if not path.exists():
            return []

        try:
            with path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Could not read %s, ignoring saved order: %s", path, e)
            return []

        task_ids = data.get("tasks") if isinstance(data, dict) else None
        if not isinstance(task_ids, list):
            return []
        return [str(task_id) for task_id in task_ids]

    def _ordered(self, tasks: dict[str, Task], index: list[str]) -> list[Task]:
        """
        Order loaded tasks by the index.

        - IDs in the index come first, in index order
        - IDs in the index without a file are dropped
        - Files missing from the index follow, by (order, created_at, id)
        """
        result: list[Task] = []
        seen: set[str] = set()
        for task_id in index:
            if task_id in tasks and task_id not in seen:
                result.append(tasks[task_id])
                seen.add(task_id)

        def sort_key(task: Task) -> tuple[int, datetime, str]:
            return (task.order, task.created_at, task.id)

        rest = [task for task_id, task in tasks.items() if task_id not in seen]
        result.extend(sorted(rest, key=sort_key))
        return result

    def _write_tasks(self, tasks: list[Task]) -> None:
        """Write task files and the index, raising StorageError on failure."""
        try:
            self.ensure_directory()

            keep: set[Path] = set()
            for task in tasks:
                filepath = self.get_filepath(task.id)
                post = frontmatter.Post(task.description, **task.to_frontmatter())
                # sort_keys=False preserves field order
                with filepath.open("w", encoding="utf-8") as f:
                    f.write(frontmatter.dumps(post, sort_keys=False))
                keep.add(filepath)

            index_path = self.task_root / self.INDEX_FILE
            with index_path.open("w", encoding="utf-8") as f:
                f.write("# Auto-generated - do not edit manually\n")
                yaml.safe_dump(
                    {"tasks": [task.id for task in tasks]},
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                )

            for filepath in self._iter_task_files():
                if filepath not in keep:
                    filepath.unlink()
        except (OSError, yaml.YAMLError) as e:
            raise StorageError(f"Cannot write tasks to {self.task_root}: {e}") from e
