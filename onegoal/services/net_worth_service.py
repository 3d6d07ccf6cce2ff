"""Assets and liabilities of a goal's finance data."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, ASSETS, LIABILITIES


class NetWorthService:
    """Service for the two net-worth lists.

    Both require existing finance data on the goal.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.assets = GoalListMutator(ASSETS, store)
        self.liabilities = GoalListMutator(LIABILITIES, store)

    # Assets
    def add_asset(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.assets.add(user_id, goal_id, data)

    def update_asset(
        self, user_id: str, goal_id: str, asset_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.assets.update(user_id, goal_id, asset_id, updates)

    def delete_asset(self, user_id: str, goal_id: str, asset_id: str) -> bool:
        return self.assets.delete(user_id, goal_id, asset_id)

    # Liabilities
    def add_liability(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.liabilities.add(user_id, goal_id, data)

    def update_liability(
        self, user_id: str, goal_id: str, liability_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.liabilities.update(user_id, goal_id, liability_id, updates)

    def delete_liability(self, user_id: str, goal_id: str, liability_id: str) -> bool:
        return self.liabilities.delete(user_id, goal_id, liability_id)
