"""Utility functions."""

from .datetime import ensure_utc, from_iso, now_utc, parse_due, relative_day
from .slug import generate_task_id, slugify

__all__ = [
    "ensure_utc",
    "from_iso",
    "generate_task_id",
    "now_utc",
    "parse_due",
    "relative_day",
    "slugify",
]
