"""Filter criteria for the task list."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from .enums import ALL, Category, Priority, SortBy, SortOrder, TaskStatus


class TaskFilters(BaseModel):
    """Active selection and sort parameters.

    Each selector is either a concrete value or the sentinel ``"all"``.
    ``assigned_to`` additionally accepts ``"unassigned"``.
    """

    model_config = ConfigDict(frozen=True)

    status: TaskStatus | Literal["all"] = ALL
    category: Category | Literal["all"] = ALL
    priority: Priority | Literal["all"] = ALL
    assigned_to: str = ALL
    search: str = ""
    sort_by: SortBy = SortBy.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC

    def with_value(self, key: str, value: Any) -> "TaskFilters":
        """Return a copy with one field replaced, validating the new value.

        Raises:
            ValueError: If the key is not a filter field.
            pydantic.ValidationError: If the value is invalid for the field.
        """
        if key not in type(self).model_fields:
            raise ValueError(f"Unknown filter: {key}")
        return type(self).model_validate({**self.model_dump(), key: value})

    @property
    def is_default(self) -> bool:
        return self == TaskFilters()
