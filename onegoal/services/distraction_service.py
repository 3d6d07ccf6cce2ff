"""Distraction (not-to-do) list operations for a goal."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, DISTRACTION_ITEMS


class DistractionService:
    """Service for the things a user wants to avoid while pursuing a goal."""

    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(DISTRACTION_ITEMS, store)

    def add_distraction_item(self, user_id: str, goal_id: str, title: str) -> Dict[str, Any]:
        """Append a distraction with no trigger patterns and a zero count.

        Args:
            user_id: Current user
            goal_id: Goal holding the list
            title: Title of the distraction, stripped

        Returns:
            The new item
        """
        return self.mutator.add(user_id, goal_id, {
            "title": (title or "").strip(),
            "description": None,
            "triggerPatterns": [],
            "count": 0,
        })

    def update_distraction_item(
        self, user_id: str, goal_id: str, item_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, item_id, updates)

    def delete_distraction_item(self, user_id: str, goal_id: str, item_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, item_id)
