"""In-memory storage backend."""

from ..models import Task, UserPreferences


class MemoryRepository:
    """Keeps saved state in process memory.

    Useful for tests and for running without durable storage. Counts saves
    so callers can check when persistence happened.
    """

    def __init__(
        self,
        tasks: list[Task] | None = None,
        preferences: UserPreferences | None = None,
    ) -> None:
        self._tasks: list[Task] = list(tasks or [])
        self._preferences = preferences or UserPreferences()
        self.task_saves = 0
        self.preference_saves = 0

    def load_tasks(self) -> list[Task]:
        return list(self._tasks)

    def save_tasks(self, tasks: list[Task]) -> None:
        self._tasks = list(tasks)
        self.task_saves += 1

    def load_preferences(self) -> UserPreferences:
        return self._preferences

    def save_preferences(self, preferences: UserPreferences) -> None:
        self._preferences = preferences
        self.preference_saves += 1
