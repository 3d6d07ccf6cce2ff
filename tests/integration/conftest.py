"""Fixtures for tests that call the functions running in the emulator.

These tests only run when ONEGOAL_INTEGRATION=1, which run_tests.py sets
after starting the emulators.
"""

import os
import uuid

import pytest
import requests

from tests.util.firebase_emulator import firebase_emulator  # noqa: F401


def pytest_collection_modifyitems(config, items):
    if os.getenv("ONEGOAL_INTEGRATION") == "1":
        return
    skip = pytest.mark.skip(reason="set ONEGOAL_INTEGRATION=1 with the emulators running")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip)


@pytest.fixture
def test_user_id():
    """A fresh user per test, so tests never share state."""
    return f"test-user-{uuid.uuid4().hex[:8]}"


@pytest.fixture
def call(firebase_emulator, test_user_id):  # noqa: F811
    """POST to a callable function as ``test_user_id``.

    Returns:
        The requests response
    """
    def _call(function_name, data, user_id=test_user_id):
        headers = {"User-Id": user_id} if user_id else {}
        return requests.post(
            f"{firebase_emulator['base_url']}/{function_name}",
            json={"data": data},
            headers=headers,
            timeout=30,
        )
    return _call


@pytest.fixture
def goal_id(call):
    """Import one goal for the test user and return its id."""
    export = '[{"name": "Integration goal", "status": "active", "financeData": null}]'
    response = call("user_data_callable", {"action": "import", "json": export})
    assert response.status_code == 200
    return response.json()["result"]["data"]["importedGoalIds"][0]
