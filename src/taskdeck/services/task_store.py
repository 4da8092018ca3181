"""Task store: the single writer of application state."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from typing import TYPE_CHECKING, Any, Literal

from ..errors import TaskNotFoundError, TaskValidationError
from ..models import (
    Action,
    AddTask,
    AppState,
    ClearFilters,
    DeleteTask,
    LoadTasks,
    PreferencesPatch,
    ReorderTasks,
    SetFilter,
    SetLoading,
    Task,
    TaskCreate,
    TaskPatch,
    TaskStats,
    ToggleTaskStatus,
    ToggleTheme,
    UpdatePreferences,
    UpdateTask,
)
from ..utils import generate_task_id, now_utc
from .filter_service import FilterService
from .reducer import reduce
from .stats_service import compute_stats
from .validation import validate_task_data

if TYPE_CHECKING:
    from ..repositories import StorageProtocol

logger = logging.getLogger(__name__)

MissingTaskPolicy = Literal["ignore", "raise"]
Listener = Callable[[AppState], None]


class TaskStore:
    """
    Owns the app state and serializes every change through the reducer.

    After each committed transition the store persists what changed (tasks
    only when auto-save is on, and nothing while loading) and then notifies
    subscribers. Persistence failures are handled by the repository and
    never affect the in-memory state.
    """

    def __init__(
        self,
        repository: StorageProtocol,
        missing_task_policy: MissingTaskPolicy = "ignore",
        filter_service: FilterService | None = None,
    ) -> None:
        self.repository = repository
        self.missing_task_policy = missing_task_policy
        self._filter_service = filter_service or FilterService()
        self._state = AppState()
        self._listeners: list[Listener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> AppState:
        """The current committed state."""
        return self._state

    # --- Dispatch ---

    def dispatch(self, action: Action) -> AppState:
        """Apply an action, persist the result and notify subscribers."""
        with self._lock:
            previous = self._state
            state = reduce(previous, action)
            if state is previous:
                return state

            self._state = state
            logger.debug("Applied %s", type(action).__name__)
            if not isinstance(action, LoadTasks):
                self._persist(previous, state)
            self._notify(state)
            return state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call ``listener`` with the new state after every change.

        Returns a function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def load(self) -> AppState:
        """Load preferences and tasks from the repository."""
        with self._lock:
            self.dispatch(SetLoading(True))
            preferences = self.repository.load_preferences()
            self.dispatch(UpdatePreferences(PreferencesPatch(**preferences.model_dump())))
            tasks = self.repository.load_tasks()
            self.dispatch(LoadTasks(tasks))
            logger.info("Loaded %d tasks", len(tasks))
            return self.dispatch(SetLoading(False))

    # --- Task operations ---

    def add_task(self, data: TaskCreate | Mapping[str, Any]) -> Task:
        """
        Validate and add a new task.

        Raises:
            TaskValidationError: If the data breaks a task rule. The state
                is left unchanged.
        """
        if not isinstance(data, TaskCreate):
            data = TaskCreate.model_validate(data)

        errors = validate_task_data(data)
        if errors:
            raise TaskValidationError(errors)

        with self._lock:
            preferences = self._state.preferences
            now = now_utc()
            task = Task(
                id=generate_task_id(data.title, {t.id for t in self._state.tasks}),
                title=data.title.strip(),
                description=data.description.strip(),
                priority=data.priority or preferences.default_priority,
                category=data.category or preferences.default_category,
                due_date=data.due_date,
                created_at=now,
                updated_at=now,
                tags=data.tags,
                assigned_to=data.assigned_to or None,
                order=len(self._state.tasks),
            )
            self.dispatch(AddTask(task))
        logger.info("Task created: %s (category=%s)", task.id, task.category.value)
        return task

    def update_task(
        self, task_id: str, patch: TaskPatch | Mapping[str, Any]
    ) -> Task | None:
        """
        Apply a partial update to a task.

        The due date rule is only checked when the patch sets a due date, so
        a task that is already overdue can still be edited.

        Returns:
            The updated task, or None if the ID is unknown.

        Raises:
            TaskValidationError: If the updated task would break a rule.
        """
        if not isinstance(patch, TaskPatch):
            patch = TaskPatch.model_validate(patch)

        with self._lock:
            existing = self._find(task_id)
            if existing is None:
                return None

            changes = patch.changes()
            for name in ("title", "description"):
                if name in changes:
                    changes[name] = changes[name].strip()

            candidate = {**existing.model_dump(), **changes}
            if "due_date" not in changes:
                candidate["due_date"] = None
            errors = validate_task_data(candidate)
            if errors:
                raise TaskValidationError(errors)

            self.dispatch(UpdateTask(task_id, TaskPatch(**changes)))
            return self._state.find_task(task_id)

    def delete_task(self, task_id: str) -> None:
        """Delete a task."""
        with self._lock:
            if self._find(task_id) is None:
                return
            self.dispatch(DeleteTask(task_id))
        logger.info("Task deleted: %s", task_id)

    def toggle_task_status(self, task_id: str) -> Task | None:
        """Advance a task to its next status."""
        with self._lock:
            if self._find(task_id) is None:
                return None
            self.dispatch(ToggleTaskStatus(task_id))
            return self._state.find_task(task_id)

    def reorder_tasks(self, task_ids: Iterable[str]) -> None:
        """Set each listed task's order to its position in ``task_ids``."""
        self.dispatch(ReorderTasks(list(task_ids)))

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by ID."""
        return self._state.find_task(task_id)

    # --- Filters and preferences ---

    def set_filter(self, key: str, value: Any) -> None:
        """
        Set one filter field.

        Raises:
            ValueError: For an unknown filter key or an invalid value.
        """
        self.dispatch(SetFilter(key, value))

    def clear_filters(self) -> None:
        self.dispatch(ClearFilters())

    def toggle_theme(self) -> None:
        self.dispatch(ToggleTheme())

    def update_preferences(self, patch: PreferencesPatch | Mapping[str, Any]) -> None:
        if not isinstance(patch, PreferencesPatch):
            patch = PreferencesPatch.model_validate(patch)
        self.dispatch(UpdatePreferences(patch))

    # --- Derived views ---

    def get_filtered_tasks(self) -> list[Task]:
        """Tasks matching the current filters, in the current sort order."""
        state = self._state
        return self._filter_service.apply(state.tasks, state.filters)

    def get_task_stats(self, now: datetime | None = None) -> TaskStats:
        """Statistics over all tasks, ignoring filters."""
        return compute_stats(self._state.tasks, now)

    # --- Private Methods ---

    def _find(self, task_id: str) -> Task | None:
        """Look up a task, applying the missing-task policy."""
        task = self._state.find_task(task_id)
        if task is None:
            if self.missing_task_policy == "raise":
                raise TaskNotFoundError(task_id)
            logger.debug("Ignoring operation on unknown task: %s", task_id)
        return task

    def _persist(self, previous: AppState, state: AppState) -> None:
        """Save whatever changed between two committed states."""
        if state.is_loading:
            return

        if state.preferences.auto_save and state.tasks is not previous.tasks:
            self.repository.save_tasks(list(state.tasks))

        if state.preferences != previous.preferences:
            self.repository.save_preferences(state.preferences)

    def _notify(self, state: AppState) -> None:
        for listener in list(self._listeners):
            try:
                listener(state)
            except Exception:
                logger.exception("State listener failed")
