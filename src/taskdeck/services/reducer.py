"""State reducer: applies typed actions to produce the next app state."""

import logging

from ..models import (
    Action,
    AddTask,
    AppState,
    ClearFilters,
    DeleteTask,
    LoadTasks,
    ReorderTasks,
    SetFilter,
    SetLoading,
    Task,
    TaskFilters,
    ToggleTaskStatus,
    ToggleTheme,
    UpdatePreferences,
    UpdateTask,
)

logger = logging.getLogger(__name__)


def reduce(state: AppState, action: Action) -> AppState:
    """
    Compute the next state for an action.

    Transitions never raise. Actions that target an unknown task ID leave
    the state unchanged and return the same instance.
    """
    if isinstance(action, LoadTasks):
        return state.model_copy(update={"tasks": action.tasks, "is_loading": False})

    if isinstance(action, AddTask):
        return state.model_copy(update={"tasks": (*state.tasks, action.task)})

    if isinstance(action, UpdateTask):
        changes = action.patch.changes()
        return _replace_task(
            state,
            action.task_id,
            lambda task: task.model_copy(update={**changes, "updated_at": action.now}),
        )

    if isinstance(action, DeleteTask):
        if not state.has_task(action.task_id):
            logger.debug("delete: task not found: %s", action.task_id)
            return state
        tasks = tuple(task for task in state.tasks if task.id != action.task_id)
        return state.model_copy(update={"tasks": tasks})

    if isinstance(action, ToggleTaskStatus):
        return _replace_task(
            state,
            action.task_id,
            lambda task: task.model_copy(
                update={"status": task.status.next(), "updated_at": action.now}
            ),
        )

    if isinstance(action, ReorderTasks):
        positions: dict[str, int] = {}
        for index, task_id in enumerate(action.task_ids):
            # First occurrence wins if an ID is repeated
            positions.setdefault(task_id, index)
        tasks = tuple(
            task.model_copy(update={"order": positions[task.id]})
            if task.id in positions
            else task
            for task in state.tasks
        )
        return state.model_copy(update={"tasks": tasks})

    if isinstance(action, SetFilter):
        filters = state.filters.model_copy(update={action.key: action.value})
        return state.model_copy(update={"filters": filters})

    if isinstance(action, ClearFilters):
        return state.model_copy(update={"filters": TaskFilters()})

    if isinstance(action, ToggleTheme):
        theme = state.theme.toggled()
        preferences = state.preferences.model_copy(update={"theme": theme})
        return state.model_copy(update={"theme": theme, "preferences": preferences})

    if isinstance(action, UpdatePreferences):
        preferences = state.preferences.merged(action.patch)
        return state.model_copy(
            update={"preferences": preferences, "theme": preferences.theme}
        )

    if isinstance(action, SetLoading):
        return state.model_copy(update={"is_loading": action.loading})

    logger.debug("Ignoring unknown action: %r", action)
    return state


def _replace_task(state: AppState, task_id: str, change) -> AppState:
    """Swap in a new version of one task, or return ``state`` if it is missing."""
    if not state.has_task(task_id):
        logger.debug("task not found: %s", task_id)
        return state

    tasks: list[Task] = []
    for task in state.tasks:
        tasks.append(change(task) if task.id == task_id else task)
    return state.model_copy(update={"tasks": tuple(tasks)})
