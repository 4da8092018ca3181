"""Application state snapshot."""

from pydantic import BaseModel, ConfigDict, Field

from .enums import Theme
from .filters import TaskFilters
from .preferences import UserPreferences
from .task import Task


class AppState(BaseModel):
    """Everything the reducer owns: tasks, filters, preferences and UI flags.

    States are immutable; the reducer returns a new instance for every
    transition that changes something and the same instance otherwise.
    """

    model_config = ConfigDict(frozen=True)

    tasks: tuple[Task, ...] = ()
    filters: TaskFilters = Field(default_factory=TaskFilters)
    is_loading: bool = True
    theme: Theme = Theme.LIGHT
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    def find_task(self, task_id: str) -> Task | None:
        """Get a task by ID."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None

    def has_task(self, task_id: str) -> bool:
        return self.find_task(task_id) is not None
