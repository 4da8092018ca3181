"""Tests for the state reducer."""

from datetime import UTC, datetime, timedelta

import pytest
from pydantic import ValidationError

from taskdeck.models import (
    ALL,
    AddTask,
    AppState,
    Category,
    ClearFilters,
    DeleteTask,
    LoadTasks,
    PreferencesPatch,
    Priority,
    ReorderTasks,
    SetFilter,
    SetLoading,
    SortBy,
    Task,
    TaskFilters,
    TaskPatch,
    TaskStatus,
    Theme,
    ToggleTaskStatus,
    ToggleTheme,
    UpdatePreferences,
    UpdateTask,
)
from taskdeck.services import reduce

NOW = datetime(2030, 6, 1, 12, 0, tzinfo=UTC)
EARLIER = NOW - timedelta(days=1)


def make_task(task_id: str, **kwargs) -> Task:
    kwargs.setdefault("title", task_id.upper())
    kwargs.setdefault("created_at", EARLIER)
    kwargs.setdefault("updated_at", EARLIER)
    return Task(id=task_id, **kwargs)


@pytest.fixture
def state() -> AppState:
    """A loaded state with three tasks."""
    return AppState(
        tasks=(make_task("a", order=0), make_task("b", order=1), make_task("c", order=2)),
        is_loading=False,
    )


class TestLoadAndLoading:
    """Tests for LoadTasks and SetLoading."""

    def test_initial_state(self):
        state = AppState()

        assert state.tasks == ()
        assert state.is_loading is True
        assert state.theme == Theme.LIGHT
        assert state.filters == TaskFilters()

    def test_load_replaces_tasks_and_clears_loading(self, state: AppState):
        new = (make_task("x"),)

        result = reduce(state.model_copy(update={"is_loading": True}), LoadTasks(new))

        assert result.tasks == new
        assert result.is_loading is False

    def test_load_accepts_list(self):
        result = reduce(AppState(), LoadTasks([make_task("x")]))
        assert isinstance(result.tasks, tuple)

    def test_set_loading(self, state: AppState):
        assert reduce(state, SetLoading(True)).is_loading is True


class TestTaskActions:
    """Tests for task add/update/delete/toggle/reorder."""

    def test_add_appends(self, state: AppState):
        task = make_task("d")

        result = reduce(state, AddTask(task))

        assert [t.id for t in result.tasks] == ["a", "b", "c", "d"]
        assert [t.id for t in state.tasks] == ["a", "b", "c"]

    def test_update_merges_and_stamps(self, state: AppState):
        """Only patched fields change, and updated_at is refreshed."""
        patch = TaskPatch(title="New", priority=Priority.URGENT)

        result = reduce(state, UpdateTask("b", patch, now=NOW))

        updated = result.find_task("b")
        assert updated.title == "New"
        assert updated.priority == Priority.URGENT
        assert updated.category == Category.PERSONAL
        assert updated.created_at == EARLIER
        assert updated.updated_at == NOW
        assert result.find_task("a") is state.find_task("a")

    def test_update_clears_due_date(self):
        state = AppState(tasks=(make_task("a", due_date=NOW),), is_loading=False)

        result = reduce(state, UpdateTask("a", TaskPatch(due_date=None), now=NOW))

        assert result.find_task("a").due_date is None

    def test_update_unknown_id_is_noop(self, state: AppState):
        result = reduce(state, UpdateTask("zzz", TaskPatch(title="x"), now=NOW))
        assert result is state

    def test_delete(self, state: AppState):
        result = reduce(state, DeleteTask("b"))
        assert [t.id for t in result.tasks] == ["a", "c"]

    def test_delete_unknown_id_is_noop(self, state: AppState):
        assert reduce(state, DeleteTask("zzz")) is state

    def test_toggle_cycles_status(self, state: AppState):
        result = reduce(state, ToggleTaskStatus("a", now=NOW))

        toggled = result.find_task("a")
        assert toggled.status == TaskStatus.IN_PROGRESS
        assert toggled.updated_at == NOW

    def test_toggle_three_times_restores_status(self, state: AppState):
        """The status cycle has length three."""
        result = state
        for _ in range(3):
            result = reduce(result, ToggleTaskStatus("a", now=NOW))

        assert result.find_task("a").status == state.find_task("a").status

    def test_toggle_unknown_id_is_noop(self, state: AppState):
        assert reduce(state, ToggleTaskStatus("zzz", now=NOW)) is state

    def test_reorder(self):
        """Listed tasks get their position; others keep their order."""
        state = AppState(
            tasks=(
                make_task("a", order=5),
                make_task("b", order=6),
                make_task("c", order=7),
                make_task("d", order=9),
            ),
            is_loading=False,
        )

        result = reduce(state, ReorderTasks(["b", "a", "c"]))

        orders = {t.id: t.order for t in result.tasks}
        assert orders == {"b": 0, "a": 1, "c": 2, "d": 9}
        # Collection order is unchanged
        assert [t.id for t in result.tasks] == ["a", "b", "c", "d"]

    def test_reorder_ignores_unknown_ids(self, state: AppState):
        result = reduce(state, ReorderTasks(["zzz", "c"]))
        assert result.find_task("c").order == 1

    def test_reorder_duplicate_first_wins(self, state: AppState):
        result = reduce(state, ReorderTasks(["c", "a", "c"]))
        assert result.find_task("c").order == 0


class TestFilterActions:
    """Tests for SetFilter and ClearFilters."""

    def test_set_filter(self, state: AppState):
        result = reduce(state, SetFilter("status", "completed"))

        assert result.filters.status == TaskStatus.COMPLETED
        assert result.tasks is state.tasks

    def test_set_filter_coerces_value(self):
        action = SetFilter("sort_by", "dueDate")
        assert action.value == SortBy.DUE_DATE

    def test_set_filter_unknown_key(self):
        with pytest.raises(ValueError):
            SetFilter("colour", "red")

    def test_set_filter_invalid_value(self):
        with pytest.raises(ValidationError):
            SetFilter("status", "archived")

    def test_clear_filters(self, state: AppState):
        filtered = reduce(state, SetFilter("priority", "high"))

        result = reduce(filtered, ClearFilters())

        assert result.filters == TaskFilters()
        assert result.filters.priority == ALL


class TestThemeAndPreferences:
    """Tests for ToggleTheme and UpdatePreferences."""

    def test_toggle_theme_updates_preferences(self, state: AppState):
        result = reduce(state, ToggleTheme())

        assert result.theme == Theme.DARK
        assert result.preferences.theme == Theme.DARK

    def test_toggle_theme_twice(self, state: AppState):
        result = reduce(reduce(state, ToggleTheme()), ToggleTheme())
        assert result.theme == state.theme

    def test_update_preferences_merges(self, state: AppState):
        patch = PreferencesPatch(default_priority=Priority.HIGH)

        result = reduce(state, UpdatePreferences(patch))

        assert result.preferences.default_priority == Priority.HIGH
        assert result.preferences.auto_save is True

    def test_update_preferences_theme_syncs(self, state: AppState):
        result = reduce(state, UpdatePreferences(PreferencesPatch(theme=Theme.DARK)))
        assert result.theme == Theme.DARK


class TestPurity:
    """Reducer transitions never modify their input."""

    def test_input_state_unchanged(self, state: AppState):
        before = state.model_dump()

        reduce(state, UpdateTask("a", TaskPatch(title="changed"), now=NOW))
        reduce(state, DeleteTask("b"))
        reduce(state, ReorderTasks(["c", "b", "a"]))
        reduce(state, ToggleTheme())

        assert state.model_dump() == before
