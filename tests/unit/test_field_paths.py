"""Tests for typed goal field paths."""

import pytest

from onegoal.exceptions import ValidationError
from onegoal.models.field_paths import (
    DailyProgressPath,
    GoalFieldPath,
    ListField,
    check_date_key,
    goal_path,
    goal_updated_at_path,
)


class TestGoalFieldPath:
    def test_goal_level_list(self):
        """Goal-level lists sit directly under the goal."""
        assert GoalFieldPath("g1", ListField.TODO_LIST).dotted() == "goals.g1.toDoList"
        assert GoalFieldPath("g1", ListField.NOT_TODO_LIST).dotted() == "goals.g1.notToDoList"
        assert GoalFieldPath("g1", ListField.STARRED_QUOTES).dotted() == "goals.g1.starredQuotes"

    def test_finance_list_is_nested(self):
        """Finance lists sit under financeData."""
        assert GoalFieldPath("g1", ListField.ASSETS).dotted() == "goals.g1.financeData.assets"
        assert (
            GoalFieldPath("g1", ListField.SUBSCRIPTIONS).dotted()
            == "goals.g1.financeData.subscriptions"
        )

    @pytest.mark.parametrize("bad_id", ["", "a.b", None])
    def test_rejects_unaddressable_goal_ids(self, bad_id):
        """Empty or dotted goal ids are rejected."""
        with pytest.raises(ValidationError) as exc:
            GoalFieldPath(bad_id, ListField.TODO_LIST).dotted()
        assert exc.value.details["field"] == "goalId"

    def test_goal_path(self):
        """Test the goal path."""
        assert goal_path("abc-123") == "goals.abc-123"


def test_every_finance_field_knows_its_container():
    """Exactly the finance lists live under financeData."""
    finance = {field for field in ListField if field.in_finance_data}
    assert finance == {
        ListField.SUBSCRIPTIONS,
        ListField.ASSETS,
        ListField.LIABILITIES,
        ListField.TRANSACTIONS,
        ListField.BUDGETS,
    }


class TestDailyProgressPath:
    def test_keyed_by_date(self):
        """A day's entry sits under the goal's dailyProgress map."""
        assert DailyProgressPath("g1", "2025-06-01").dotted() == "goals.g1.dailyProgress.2025-06-01"

    @pytest.mark.parametrize("bad_date", ["", "2025-6-1", "2025-02-30", "2025-06-01.x", None])
    def test_rejects_invalid_dates(self, bad_date):
        """Only real calendar dates written as YYYY-MM-DD are addressable."""
        with pytest.raises(ValidationError) as exc:
            DailyProgressPath("g1", bad_date).dotted()
        assert exc.value.details["field"] == "date"

    def test_check_date_key_returns_key(self):
        """A valid key is returned unchanged."""
        assert check_date_key("2024-02-29") == "2024-02-29"

    def test_goal_updated_at_path(self):
        """The goal's own timestamp is addressed next to its lists."""
        assert goal_updated_at_path("g1") == "goals.g1.updatedAt"
