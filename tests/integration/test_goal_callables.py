"""End-to-end tests of the callable functions against the emulators."""

import json

import pytest
import requests


def result_of(response):
    assert response.status_code == 200, response.text
    body = response.json()["result"]
    assert body["success"] is True
    return body["data"]


@pytest.mark.integration
class TestUserData:
    def test_first_access_creates_empty_state(self, call):
        """First access returns an empty state."""
        data = result_of(call("user_data_callable", {"action": "get"}))
        assert data == {"activeGoalId": None, "goals": {}}

    def test_unauthenticated_call_is_rejected(self, call):
        """Calls without a user are rejected."""
        response = call("user_data_callable", {"action": "get"}, user_id=None)
        assert response.status_code == 401

    def test_import_pauses_goals_and_export_round_trips(self, call, goal_id):
        """Imported goals are paused and exported again."""
        state = result_of(call("user_data_callable", {"action": "get"}))
        assert state["goals"][goal_id]["status"] == "paused"

        exported = json.loads(result_of(call("user_data_callable", {"action": "export"}))["json"])
        assert [g["name"] for g in exported] == ["Integration goal"]

    def test_invalid_import(self, call):
        """Invalid files are rejected."""
        response = call("user_data_callable", {"action": "import", "json": '{"not": "a list"}'})

        assert response.status_code == 400
        assert response.json()["error"]["message"] == "Import failed. Invalid file format."


@pytest.mark.integration
class TestTodoFlow:
    def test_add_prepends_and_completes(self, call, goal_id):
        """To-dos are prepended and can be completed."""
        first = result_of(call("todo_callable", {"action": "add", "goalId": goal_id, "text": "first"}))
        second = result_of(call("todo_callable", {"action": "add", "goalId": goal_id, "text": "second"}))

        state = result_of(call("user_data_callable", {"action": "get"}))
        todos = state["goals"][goal_id]["toDoList"]
        assert [(t["id"], t["order"]) for t in todos] == [(second["id"], 0), (first["id"], 1)]

        done = result_of(call("todo_callable", {
            "action": "update", "goalId": goal_id, "itemId": first["id"], "updates": {"completed": True},
        }))
        assert done["completedAt"] is not None

    def test_unknown_goal(self, call):
        """A missing goal is not found."""
        response = call("todo_callable", {"action": "add", "goalId": "missing", "text": "x"})

        assert response.status_code == 404
        assert response.json()["error"]["message"] == "Goal with ID missing not found."


@pytest.mark.integration
class TestFinanceFlow:
    def test_subscriptions_require_finance_data(self, call, goal_id):
        """Subscriptions need finance data."""
        response = call("finance_callable", {
            "list": "subscriptions", "action": "add", "goalId": goal_id,
            "item": {"name": "Music", "amount": 9.99, "nextBillingDate": "2025-07-01T00:00:00.000Z"},
        })
        assert response.status_code == 404

    def test_budgets_work_without_finance_data(self, call, goal_id):
        """Budgets work without finance data."""
        budget = result_of(call("finance_callable", {
            "list": "budgets", "action": "add", "goalId": goal_id,
            "item": {"category": "Food", "amount": 300},
        }))
        assert budget["period"] == "monthly"


@pytest.mark.integration
def test_starring_a_quote_twice_keeps_one_entry(call, goal_id):
    """Starring twice keeps one entry."""
    for _ in range(2):
        result_of(call("quote_callable", {"action": "star", "goalId": goal_id, "quoteId": 5}))

    state = result_of(call("user_data_callable", {"action": "get"}))
    assert state["goals"][goal_id]["starredQuotes"] == [5]


@pytest.mark.integration
def test_health_check(firebase_emulator):
    """Test the health check endpoint."""
    response = requests.get(f"{firebase_emulator['base_url']}/health_check", timeout=30)

    assert response.status_code == 200
    assert response.json()["services"]["database"] == "healthy"
