"""Storage protocol for task persistence backends."""

from typing import Protocol

from ..models import Task, UserPreferences


class StorageProtocol(Protocol):
    """Interface for durable task and preference storage.

    Implementations must round-trip every timestamp field losslessly and
    must treat a missing or empty backing store as "nothing saved yet".
    Write failures are logged by the implementation and never raised to
    the caller: the in-memory state stays the source of truth.
    """

    def load_tasks(self) -> list[Task]:
        """Load all saved tasks.

        Returns:
            Tasks in their saved collection order, or an empty list.
        """
        ...

    def save_tasks(self, tasks: list[Task]) -> None:
        """Replace the saved task collection.

        Args:
            tasks: The full collection, in order. Tasks not in the list are
                removed from storage.
        """
        ...

    def load_preferences(self) -> UserPreferences:
        """Load saved preferences, or defaults if none are stored."""
        ...

    def save_preferences(self, preferences: UserPreferences) -> None:
        """Persist preferences."""
        ...
