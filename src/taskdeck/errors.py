"""Exception types raised by taskdeck."""


class TaskdeckError(Exception):
    """Base class for taskdeck errors."""


class TaskValidationError(TaskdeckError, ValueError):
    """User input violates one or more task rules.

    ``errors`` holds every violated rule as a human-readable message.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


class TaskNotFoundError(TaskdeckError, KeyError):
    """A mutation targeted a task ID that is not in the store."""

    def __init__(self, task_id: str) -> None:
        self.task_id = task_id
        super().__init__(task_id)

    def __str__(self) -> str:
        return f"Task not found: {self.task_id}"


class StorageError(TaskdeckError):
    """Reading or writing durable storage failed."""
