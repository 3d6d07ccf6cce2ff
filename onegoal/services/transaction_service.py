"""Income and expense transactions of a goal's finance data."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, TRANSACTIONS


class TransactionService:
    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(TRANSACTIONS, store)

    def add_transaction(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutator.add(user_id, goal_id, data)

    def update_transaction(
        self, user_id: str, goal_id: str, transaction_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, transaction_id, updates)

    def delete_transaction(self, user_id: str, goal_id: str, transaction_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, transaction_id)
