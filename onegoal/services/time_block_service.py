"""Daily time blocks of a goal's routine."""

from typing import Any, Dict, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.lists import GoalListMutator, TIME_BLOCKS


class TimeBlockService:
    """Service for time blocks. Start and end times are "HH:MM" strings."""

    def __init__(self, store: Optional[DocumentStore] = None):
        self.mutator = GoalListMutator(TIME_BLOCKS, store)

    def add_time_block(
        self, user_id: str, goal_id: str, label: str, start_time: str, end_time: str, color: str
    ) -> Dict[str, Any]:
        """Append a time block that is not yet completed.

        Args:
            user_id: Current user
            goal_id: Goal holding the list
            label: Label of the block, stripped
            start_time: Start in "HH:MM"
            end_time: End in "HH:MM"
            color: Display color

        Returns:
            The new block
        """
        return self.mutator.add(user_id, goal_id, {
            "label": (label or "").strip(),
            "startTime": start_time,
            "endTime": end_time,
            "color": color,
            "completed": False,
            "completedAt": None,
        })

    def update_time_block(
        self, user_id: str, goal_id: str, block_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        return self.mutator.update(user_id, goal_id, block_id, updates)

    def delete_time_block(self, user_id: str, goal_id: str, block_id: str) -> bool:
        return self.mutator.delete(user_id, goal_id, block_id)
