"""Sticky note operations for a goal."""

from typing import Any, Dict, Optional, Union

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, STICKY_NOTES
from onegoal.models.util_types import StickyNoteColor


class StickyNoteService:
    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(STICKY_NOTES, store)

    def add_sticky_note(
        self,
        user_id: str,
        goal_id: str,
        title: str,
        content: str,
        color: Union[StickyNoteColor, str] = StickyNoteColor.YELLOW,
    ) -> Dict[str, Any]:
        """Append a sticky note. Title and content are stripped."""
        return self.mutator.add(user_id, goal_id, {
            "title": (title or "").strip(),
            "content": (content or "").strip(),
            "color": color,
        })

    def update_sticky_note(
        self, user_id: str, goal_id: str, item_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, item_id, updates)

    def delete_sticky_note(self, user_id: str, goal_id: str, item_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, item_id)
