"""Service for parsing filter expressions and filtering/sorting tasks."""

import contextlib
import re
import unicodedata
from collections.abc import Iterable
from functools import cmp_to_key

from ..models import ALL, UNASSIGNED, SortBy, SortOrder, Task, TaskFilters
from ..models.enums import PRIORITY_RANK, Category, Priority, TaskStatus


def _normalize_key(value: str) -> str:
    """Lowercase and drop separators so "due_date" matches "dueDate"."""
    return re.sub(r"[\s_\-]", "", value.lower())


def _collation_key(text: str) -> tuple[str, str, str]:
    """Sort key approximating locale-aware collation.

    Accents and case only break ties, lowercase first:
    "cena" < "Cena" < "céna" < "dentista".
    """
    folded = text.casefold()
    base = unicodedata.normalize("NFKD", folded)
    base = "".join(c for c in base if not unicodedata.combining(c))
    return (base, folded, text.swapcase())


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


class FilterService:
    """Service for parsing filter expressions and applying filters to tasks."""

    # Pattern for key:value tokens; values may be double-quoted
    TOKEN_PATTERN = re.compile(
        r'(-?)(?:(status|category|priority|assigned|sort|order):)?(?:"([^"]*)"|(\S+))'
    )

    _SORT_KEYS = {_normalize_key(s.value): s for s in SortBy}
    _STATUSES = {_normalize_key(s.value): s for s in TaskStatus}

    def parse(self, expression: str, base: TaskFilters | None = None) -> TaskFilters:
        """
        Parse a filter expression string into filter criteria.

        Syntax:
        - Free text: search in title, description or tags
        - status:pending/in-progress/completed/all
        - category:work/personal/shopping/health/education/other/all
        - priority:low/medium/high/urgent/all
        - assigned:NAME, assigned:"Full Name", assigned:unassigned
        - sort:createdAt/dueDate/priority/title/order
        - order:asc/desc

        Fields not mentioned keep their value from ``base`` (or the
        defaults). Invalid values are ignored, and so are negated tokens
        (``-draft``, ``-status:completed``).
        """
        updates: dict = {}
        text_parts: list[str] = []

        for match in self.TOKEN_PATTERN.finditer(expression):
            negated = match.group(1) == "-"
            key = match.group(2)
            raw = match.group(3) if match.group(3) is not None else match.group(4)
            value = raw.lower()

            if negated:
                # Exclusion is not supported
                continue

            if key is None:
                text_parts.append(raw)

            elif value == ALL and key in ("status", "category", "priority", "assigned"):
                updates["assigned_to" if key == "assigned" else key] = ALL

            elif key == "status":
                status = self._STATUSES.get(_normalize_key(value))
                if status is not None:
                    updates["status"] = status

            elif key == "category":
                with contextlib.suppress(ValueError):
                    updates["category"] = Category(value)

            elif key == "priority":
                with contextlib.suppress(ValueError):
                    updates["priority"] = Priority(value)

            elif key == "assigned":
                # Assignee names are matched exactly, keep original case
                updates["assigned_to"] = UNASSIGNED if value == UNASSIGNED else raw

            elif key == "sort":
                sort_by = self._SORT_KEYS.get(_normalize_key(value))
                if sort_by is not None:
                    updates["sort_by"] = sort_by

            elif key == "order":
                with contextlib.suppress(ValueError):
                    updates["sort_order"] = SortOrder(value)

        if text_parts:
            updates["search"] = " ".join(text_parts)

        base = base or TaskFilters()
        return base.model_copy(update=updates)

    def apply(self, tasks: Iterable[Task], filters: TaskFilters) -> list[Task]:
        """Filter and sort tasks. The input is never modified."""
        result: list[Task] = []

        for task in tasks:
            if self._matches(task, filters):
                result.append(task)

        descending = filters.sort_order == SortOrder.DESC

        def compare(a: Task, b: Task) -> int:
            comparison = self._compare(a, b, filters.sort_by)
            return -comparison if descending else comparison

        # sorted() is stable: ties keep their input order
        return sorted(result, key=cmp_to_key(compare))

    def _matches(self, task: Task, f: TaskFilters) -> bool:
        """Check if a task matches every active filter."""
        # Text search (case-insensitive)
        search_text = f.search.strip().lower()
        if search_text:
            in_title = search_text in task.title.lower()
            in_description = search_text in task.description.lower()
            in_tags = any(search_text in tag.lower() for tag in task.tags)
            if not (in_title or in_description or in_tags):
                return False

        if f.status != ALL and task.status != f.status:
            return False

        if f.category != ALL and task.category != f.category:
            return False

        if f.priority != ALL and task.priority != f.priority:
            return False

        if f.assigned_to != ALL:
            unassigned_match = f.assigned_to == UNASSIGNED and not task.assigned_to
            if task.assigned_to != f.assigned_to and not unassigned_match:
                return False

        return True

    def _compare(self, a: Task, b: Task, sort_by: SortBy) -> int:
        """Raw ascending comparison for one sort key."""
        if sort_by == SortBy.TITLE:
            return _cmp(_collation_key(a.title), _collation_key(b.title))

        if sort_by == SortBy.CREATED_AT:
            return _cmp(a.created_at, b.created_at)

        if sort_by == SortBy.DUE_DATE:
            # Undated tasks go last in ascending order
            if a.due_date is None and b.due_date is None:
                return 0
            if a.due_date is None:
                return 1
            if b.due_date is None:
                return -1
            return _cmp(a.due_date, b.due_date)

        if sort_by == SortBy.PRIORITY:
            return PRIORITY_RANK[a.priority] - PRIORITY_RANK[b.priority]

        if sort_by == SortBy.ORDER:
            return _cmp(a.order, b.order)

        return 0


_default_service = FilterService()


def filter_and_sort(tasks: Iterable[Task], filters: TaskFilters) -> list[Task]:
    """Apply filter criteria to tasks and return them in sorted order."""
    return _default_service.apply(tasks, filters)
