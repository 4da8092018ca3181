"""CLI commands operating on a loaded task store."""

import argparse
import logging

from pydantic import ValidationError

from ..errors import TaskNotFoundError, TaskValidationError
from ..models import TaskCreate, TaskFilters, TaskPatch
from ..sample_data import seed_if_empty
from ..services import FilterService, TaskStore
from ..utils import parse_due
from .output import error, format_stats, format_task, header, info, success

logger = logging.getLogger(__name__)

# CLI flag -> filter field
FILTER_FLAGS = {
    "status": "status",
    "category": "category",
    "priority": "priority",
    "assigned": "assigned_to",
    "search": "search",
    "sort": "sort_by",
    "order": "sort_order",
}


def resolve_task_id(store: TaskStore, task_ref: str) -> str:
    """
    Resolve a full task ID or a unique ID prefix.

    Raises:
        TaskNotFoundError: If nothing matches or the prefix is ambiguous.
    """
    if store.get_task(task_ref) is not None:
        return task_ref
    matches = [task.id for task in store.state.tasks if task.id.startswith(task_ref)]
    if len(matches) == 1:
        return matches[0]
    if len(matches) > 1:
        logger.debug("Ambiguous task prefix %s: %s", task_ref, matches)
    raise TaskNotFoundError(task_ref)


def _warn_if_not_saved(store: TaskStore) -> None:
    if not store.state.preferences.auto_save:
        info("Auto-save is off: task changes were not written to disk")


def run_list(store: TaskStore, args: argparse.Namespace) -> int:
    """Print tasks matching the filter expression and flags."""
    try:
        if args.filter:
            parsed = FilterService().parse(args.filter, base=store.state.filters)
            for key in TaskFilters.model_fields:
                if getattr(parsed, key) != getattr(store.state.filters, key):
                    store.set_filter(key, getattr(parsed, key))

        for flag, key in FILTER_FLAGS.items():
            value = getattr(args, flag, None)
            if value is not None:
                store.set_filter(key, value)
    except ValueError as e:
        error(f"Invalid filter: {e}")
        return 1

    tasks = store.get_filtered_tasks()
    header(f"{len(tasks)} of {len(store.state.tasks)} tasks")
    for task in tasks:
        print(format_task(task))
    return 0


def run_add(store: TaskStore, args: argparse.Namespace) -> int:
    """Create a task from command-line arguments."""
    try:
        data = TaskCreate(
            title=args.title,
            description=args.description or "",
            priority=args.priority,
            category=args.category,
            due_date=parse_due(args.due) if args.due else None,
            tags=args.tag or [],
            assigned_to=args.assign,
        )
        task = store.add_task(data)
    except TaskValidationError as e:
        for message in e.errors:
            error(message)
        return 1
    except (ValidationError, ValueError) as e:
        error(str(e))
        return 1

    success(f"Added {task.title} ({task.id})")
    _warn_if_not_saved(store)
    return 0


def run_edit(store: TaskStore, args: argparse.Namespace) -> int:
    """Update fields of an existing task."""
    changes: dict = {}
    for name in ("title", "description", "status", "priority", "category"):
        value = getattr(args, name)
        if value is not None:
            changes[name] = value
    if args.tag is not None:
        changes["tags"] = args.tag
    if args.assign is not None:
        changes["assigned_to"] = args.assign
    if args.unassign:
        changes["assigned_to"] = None
    if args.clear_due:
        changes["due_date"] = None

    try:
        if args.due:
            changes["due_date"] = parse_due(args.due)
        task_id = resolve_task_id(store, args.task_id)
        task = store.update_task(task_id, TaskPatch(**changes))
    except TaskNotFoundError as e:
        error(str(e))
        return 1
    except TaskValidationError as e:
        for message in e.errors:
            error(message)
        return 1
    except (ValidationError, ValueError) as e:
        error(str(e))
        return 1

    if task is not None:
        success(f"Updated {task.title}")
    _warn_if_not_saved(store)
    return 0


def run_toggle(store: TaskStore, args: argparse.Namespace) -> int:
    """Advance a task's status."""
    try:
        task = store.toggle_task_status(resolve_task_id(store, args.task_id))
    except TaskNotFoundError as e:
        error(str(e))
        return 1

    if task is not None:
        success(f"{task.title}: {task.status.value}")
    _warn_if_not_saved(store)
    return 0


def run_delete(store: TaskStore, args: argparse.Namespace) -> int:
    """Delete a task."""
    try:
        task_id = resolve_task_id(store, args.task_id)
    except TaskNotFoundError as e:
        error(str(e))
        return 1

    store.delete_task(task_id)
    success(f"Deleted {task_id}")
    _warn_if_not_saved(store)
    return 0


def run_reorder(store: TaskStore, args: argparse.Namespace) -> int:
    """Give the listed tasks positions 0..n-1 in the given order."""
    try:
        task_ids = [resolve_task_id(store, ref) for ref in args.task_ids]
    except TaskNotFoundError as e:
        error(str(e))
        return 1

    store.reorder_tasks(task_ids)
    success(f"Reordered {len(task_ids)} tasks")
    _warn_if_not_saved(store)
    return 0


def run_stats(store: TaskStore, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Print task statistics."""
    header("Task statistics")
    for line in format_stats(store.get_task_stats()):
        print(line)
    return 0


def run_theme(store: TaskStore, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Switch between light and dark theme."""
    store.toggle_theme()
    success(f"Theme: {store.state.theme.value}")
    return 0


def run_seed(store: TaskStore, args: argparse.Namespace) -> int:  # noqa: ARG001
    """Load the sample tasks into an empty store."""
    seeded = seed_if_empty(store.repository)
    if seeded is None:
        info("Store already has tasks, nothing seeded")
        return 0

    store.load()
    success(f"Seeded {len(seeded)} sample tasks")
    return 0


COMMANDS = {
    "list": run_list,
    "add": run_add,
    "edit": run_edit,
    "toggle": run_toggle,
    "delete": run_delete,
    "reorder": run_reorder,
    "stats": run_stats,
    "theme": run_theme,
    "seed": run_seed,
}
