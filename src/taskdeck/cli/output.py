"""Colorful CLI output helpers."""

import sys
from datetime import datetime

from ..models import Priority, Task, TaskStats, TaskStatus
from ..utils import relative_day

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗

STATUS_SYMBOLS = {
    TaskStatus.PENDING: "\u25cb",  # ○
    TaskStatus.IN_PROGRESS: "\u25d0",  # ◐
    TaskStatus.COMPLETED: CHECK,
}

PRIORITY_COLORS = {
    Priority.LOW: GREEN,
    Priority.MEDIUM: YELLOW,
    Priority.HIGH: YELLOW,
    Priority.URGENT: RED,
}


def _supports_color() -> bool:
    """Check if terminal supports color output."""
    # Check if stdout is a TTY
    if not hasattr(sys.stdout, "isatty") or not sys.stdout.isatty():
        return False
    return True


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    check = _colorize(CHECK, GREEN)
    print(f"{check} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    bullet = _colorize(BULLET, YELLOW)
    print(f"{bullet} {message}")


def header(message: str) -> None:
    """Print header message in blue."""
    print(_colorize(message, BLUE))


def error(message: str) -> None:
    """Print error message with red cross."""
    cross = _colorize(CROSS, RED)
    print(f"{cross} {message}", file=sys.stderr)


def format_task(task: Task, now: datetime | None = None) -> str:
    """One-line summary of a task.

    Example: "○  Comprar pan  [medium]  shopping  due tomorrow  #cena  (comprar-pan-3f9a2c1b)"
    """
    parts = [STATUS_SYMBOLS[task.status], task.title]
    parts.append(_colorize(f"[{task.priority.value}]", PRIORITY_COLORS[task.priority]))
    parts.append(task.category.value)

    if task.due_date:
        due = f"due {relative_day(task.due_date, now)}"
        parts.append(_colorize(due, RED) if task.is_overdue(now) else due)

    if task.tags:
        parts.append(" ".join(f"#{tag}" for tag in task.tags))

    if task.assigned_to:
        parts.append(f"@{task.assigned_to}")

    parts.append(_colorize(f"({task.id})", DIM))
    return "  ".join(parts)


def format_stats(stats: TaskStats) -> list[str]:
    """Lines summarizing task statistics."""
    lines = [
        f"Total: {stats.total}",
        f"Pending: {stats.pending}  In progress: {stats.in_progress}  "
        f"Completed: {stats.completed}",
        f"Overdue: {stats.overdue}",
        f"Completion rate: {stats.completion_rate}%",
        "By category: "
        + ", ".join(f"{category.value}={count}" for category, count in stats.by_category.items()),
        "By priority: "
        + ", ".join(f"{priority.value}={count}" for priority, count in stats.by_priority.items()),
    ]
    return lines
