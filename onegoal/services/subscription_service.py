"""Recurring subscriptions tracked in a goal's finance data."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, SUBSCRIPTIONS


class SubscriptionService:
    """Service for subscriptions.

    Every operation fails with FinanceDataNotFoundError when the goal has no
    finance data yet.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(SUBSCRIPTIONS, store)

    def add_subscription(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and append a subscription.

        Args:
            user_id: Current user
            goal_id: Goal holding the finance data
            data: Subscription fields without id or timestamps

        Returns:
            The new subscription

        Raises:
            ValidationError: If ``data`` does not describe a valid subscription
        """
        return self.mutator.add(user_id, goal_id, data)

    def update_subscription(
        self, user_id: str, goal_id: str, subscription_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, subscription_id, updates)

    def delete_subscription(self, user_id: str, goal_id: str, subscription_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, subscription_id)
