"""Tests for GoalService."""

import pytest

from onegoal.exceptions import StoreReadError, StoreWriteError, ValidationError
from onegoal.services.goal_service import GoalService, default_app_state


class TestGetUserData:
    def test_returns_stored_state(self, store, user_id):
        """Test reading stored state."""
        state = GoalService(store).get_user_data(user_id)

        assert state["activeGoalId"] == "g1"
        assert set(state["goals"]) == {"g1", "g2"}
        assert store.calls_to("set") == []

    def test_creates_empty_state_on_first_access(self, empty_store):
        """First access stores an empty state."""
        state = GoalService(empty_store).get_user_data("new-user")

        assert state == {"activeGoalId": None, "goals": {}}
        assert empty_store.docs["new-user"] == default_app_state()

    def test_read_failure(self, store, user_id):
        """Read failures are wrapped."""
        store.fail_on.add("get")

        with pytest.raises(StoreReadError) as exc:
            GoalService(store).get_user_data(user_id)
        assert exc.value.message == "Failed to load user data."

    def test_malformed_state_is_not_overwritten(self, user_id):
        """Malformed state raises instead of being reset."""
        from tests.util.memory_store import MemoryDocumentStore

        store = MemoryDocumentStore({user_id: {"goals": ["not", "a", "map"]}})

        with pytest.raises(ValidationError) as exc:
            GoalService(store).get_user_data(user_id)
        assert exc.value.message == "Stored data is malformed."
        assert store.calls_to("set") == []


def test_set_active_goal(store, user_id):
    """Setting the active goal is a single field update."""
    GoalService(store).set_active_goal(user_id, "g2")

    assert store.docs[user_id]["activeGoalId"] == "g2"
    assert store.calls_to("update") == [("update", user_id, {"activeGoalId": "g2"})]


def test_set_active_goal_failure(store, user_id):
    """Test a failed active goal update."""
    store.fail_on.add("update")
    with pytest.raises(StoreWriteError) as exc:
        GoalService(store).set_active_goal(user_id, "g2")
    assert exc.value.message == "Failed to set active goal."


def test_reset_user_data(store, user_id):
    """Reset stores the empty state."""
    GoalService(store).reset_user_data(user_id)
    assert store.docs[user_id] == default_app_state()


def test_set_user_data_rejects_invalid_state(store, user_id):
    """Invalid state is never stored."""
    with pytest.raises(ValidationError):
        GoalService(store).set_user_data(user_id, {"goals": 5})
    assert store.calls_to("set") == []


def test_set_user_data_failure(store, user_id):
    """Test a failed state write."""
    store.fail_on.add("set")
    with pytest.raises(StoreWriteError) as exc:
        GoalService(store).set_user_data(user_id, default_app_state())
    assert exc.value.message == "Failed to set user data during import."


class TestImportGoals:
    def test_adds_goals_next_to_existing_ones(self, store, user_id):
        """Imported goals join the existing ones, active ones paused."""
        goals = [
            {"id": "new-1", "name": "Learn piano", "status": "active"},
            {"id": "new-2", "name": "Run a marathon", "status": "completed"},
        ]

        written = GoalService(store).import_goals(user_id, goals)

        stored = store.docs[user_id]["goals"]
        assert set(stored) == {"g1", "g2", "new-1", "new-2"}
        assert stored["new-1"]["status"] == "paused"
        assert "updatedAt" in stored["new-1"]
        assert stored["new-2"]["status"] == "completed"
        assert [g["id"] for g in written] == ["new-1", "new-2"]
        assert store.docs[user_id]["activeGoalId"] == "g1"
        assert len(store.calls_to("update")) == 1

    def test_creates_state_for_new_user(self, empty_store):
        """Importing creates state for a new user."""
        GoalService(empty_store).import_goals("new-user", [{"id": "x", "name": "Goal"}])

        assert empty_store.docs["new-user"]["goals"]["x"]["name"] == "Goal"

    def test_failure(self, store, user_id):
        """Test a failed import write."""
        store.fail_on.add("update")
        with pytest.raises(StoreWriteError) as exc:
            GoalService(store).import_goals(user_id, [{"id": "x", "name": "Goal"}])
        assert exc.value.message == "Failed to import goals."
