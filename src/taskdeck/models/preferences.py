"""User preference models."""

from pydantic import BaseModel, ConfigDict

from .enums import Category, Priority, Theme


class UserPreferences(BaseModel):
    """Per-user settings persisted alongside the tasks."""

    model_config = ConfigDict(frozen=True)

    theme: Theme = Theme.LIGHT
    default_category: Category = Category.PERSONAL
    default_priority: Priority = Priority.MEDIUM
    auto_save: bool = True
    notifications: bool = True

    def merged(self, patch: "PreferencesPatch") -> "UserPreferences":
        """Return these preferences with the patch's set fields applied."""
        return self.model_copy(update=patch.changes())


class PreferencesPatch(BaseModel):
    """Partial preference update; unset fields are left alone."""

    model_config = ConfigDict(frozen=True)

    theme: Theme | None = None
    default_category: Category | None = None
    default_priority: Priority | None = None
    auto_save: bool | None = None
    notifications: bool | None = None

    def changes(self) -> dict:
        return {
            name: getattr(self, name)
            for name in self.model_fields_set
            if getattr(self, name) is not None
        }
