"""Pytest configuration and fixtures."""

import os
import sys
from datetime import datetime, timezone

import pytest

# Add root to path for main.py and the onegoal package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from tests.util.memory_store import MemoryDocumentStore  # noqa: E402

CREATED = datetime(2024, 1, 1, 8, 30, tzinfo=timezone.utc)


def _item(**fields):
    return {"createdAt": CREATED, "updatedAt": CREATED, **fields}


def seeded_state():
    """User state with one fully populated goal and one bare goal."""
    return {
        "activeGoalId": "g1",
        "goals": {
            "g1": {
                "id": "g1",
                "name": "Ship the side project",
                "description": None,
                "startDate": CREATED,
                "endDate": datetime(2024, 12, 31, tzinfo=timezone.utc),
                "status": "active",
                "createdAt": CREATED,
                "updatedAt": CREATED,
                "dailyProgress": {},
                "toDoList": [
                    _item(id="todo-1", text="existing", description=None, order=0,
                          completed=False, completedAt=None, deadline=None),
                ],
                "notToDoList": [
                    _item(id="d1", title="Social media", description=None,
                          triggerPatterns=[], count=2),
                ],
                "stickyNotes": [
                    _item(id="n1", title="Idea", content="", color="yellow"),
                ],
                "resources": [],
                "timeBlocks": [
                    _item(id="tb1", label="Deep work", startTime="09:00", endTime="11:00",
                          color="blue", completed=False, completedAt=None),
                ],
                "starredQuotes": [7],
                "financeData": {
                    "transactions": [],
                    "budgets": [],
                    "subscriptions": [
                        _item(id="s1", name="Music", amount=9.99, billingCycle="monthly",
                              nextBillingDate=CREATED),
                    ],
                    "assets": [],
                    "liabilities": [],
                    "netWorthHistory": [],
                },
            },
            "g2": {
                "id": "g2",
                "name": "No finance yet",
                "status": "paused",
                "toDoList": [],
                "financeData": None,
            },
        },
    }


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the caller's shell environment out of the tests."""
    for name in ("ENV", "FUNCTIONS_EMULATOR", "ONEGOAL_USERS_COLLECTION", "ONEGOAL_IMPORT_MAX_BYTES"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def user_id():
    return "u1"


@pytest.fixture
def goal_id():
    return "g1"


@pytest.fixture
def store(user_id):
    """Store holding the seeded state for ``user_id``."""
    return MemoryDocumentStore({user_id: seeded_state()})


@pytest.fixture
def empty_store():
    return MemoryDocumentStore()


@pytest.fixture
def stored_goal(store, user_id):
    """Return a goal as it currently sits in the store."""
    def _get(goal_id="g1"):
        return store.docs[user_id]["goals"][goal_id]
    return _get
