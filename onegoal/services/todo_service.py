"""To-do list operations for a goal."""

from typing import Any, Dict, List, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, TODO_ITEMS


class TodoService:
    """Service for a goal's ordered to-do list.

    New items go to the top with ``order=0`` and every existing item moves
    down by one, so ``order`` stays contiguous from 0.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        """Initialize TodoService.

        Args:
            store: Optional document store, Firestore by default
        """
        self.mutator = GoalListMutator(TODO_ITEMS, store)

    def add_todo_item(self, user_id: str, goal_id: str, text: str) -> Dict[str, Any]:
        """Add a to-do item at the top of the list.

        Args:
            user_id: Current user
            goal_id: Goal holding the list
            text: Item text, surrounding whitespace is stripped

        Returns:
            The new item
        """
        return self.mutator.add(user_id, goal_id, {
            "text": (text or "").strip(),
            "description": None,
            "completed": False,
            "completedAt": None,
            "deadline": None,
        })

    def update_todo_item(
        self, user_id: str, goal_id: str, item_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Update fields of an item. Changing ``completed`` maintains ``completedAt``."""
        return self.mutator.update(user_id, goal_id, item_id, updates)

    def delete_todo_item(self, user_id: str, goal_id: str, item_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, item_id)

    def update_todo_list_order(
        self, user_id: str, goal_id: str, reordered_list: List[Dict[str, Any]]
    ) -> List[Dict[str, Any]]:
        """Replace the whole list with ``reordered_list``, e.g. after drag and drop."""
        return self.mutator.reorder(user_id, goal_id, reordered_list)
