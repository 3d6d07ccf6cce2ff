"""Budgets of a goal's finance data."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.documents.lists import GoalListMutator, BUDGETS
from onegoal.models.field_paths import GoalFieldPath, ListField
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger

logger = get_logger(__name__)

# Lists whose items may point at a budget through ``budgetId``
_LINKED_FIELDS = (ListField.TRANSACTIONS, ListField.SUBSCRIPTIONS)


class BudgetService:
    """Service for budgets.

    Unlike the other finance lists, a goal without finance data is treated
    as having no budgets, so the first budget can be added to it.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(BUDGETS, store)

    @property
    def store(self) -> DocumentStore:
        return self.mutator.store

    def add_budget(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self.mutator.add(user_id, goal_id, data)

    def update_budget(
        self, user_id: str, goal_id: str, budget_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, budget_id, updates)

    def delete_budget(self, user_id: str, goal_id: str, budget_id: str) -> bool:
        """Remove a budget together with the transactions and subscriptions
        assigned to it.

        The three lists are written in a single update. Returns whether the
        budget was present.
        """
        with error_boundary(f"Failed to delete budget {budget_id}."):
            state = AppStateDocument(user_id, store=self.store)
            budgets = state.read_list(goal_id, ListField.BUDGETS, require_finance_data=False)
            remaining = [b for b in budgets if not (isinstance(b, dict) and b.get("id") == budget_id)]
            field_map = {GoalFieldPath(goal_id, ListField.BUDGETS).dotted(): remaining}

            dropped = 0
            for field in _LINKED_FIELDS:
                items = state.read_list(goal_id, field, require_finance_data=False)
                kept = [i for i in items if not (isinstance(i, dict) and i.get("budgetId") == budget_id)]
                dropped += len(items) - len(kept)
                field_map[GoalFieldPath(goal_id, field).dotted()] = kept

            state.update_doc(field_map)

        removed = len(remaining) != len(budgets)
        logger.info(
            f"Deleted budget {budget_id} from goal {goal_id} of user {user_id} "
            f"(removed={removed}, linked items dropped={dropped})"
        )
        return removed
