"""Operations on the user state document as a whole."""

from typing import Any, Dict, List, Optional

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.exceptions import StoreReadError, UserDataNotFoundError
from onegoal.models.field_paths import goal_path
from onegoal.models.util_types import GoalStatus
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import now

logger = get_logger(__name__)


def default_app_state() -> Dict[str, Any]:
    return {"activeGoalId": None, "goals": {}}


class GoalService:
    """Service for reading and replacing the user state document."""

    def __init__(self, store: Optional[DocumentStore] = None):
        """Initialize GoalService.

        Args:
            store: Optional document store, Firestore by default
        """
        self.store = store or FirestoreDocumentStore()

    def get_user_data(self, user_id: str) -> Dict[str, Any]:
        """Return the user's state, creating an empty one on first access.

        Args:
            user_id: Current user

        Returns:
            The stored state document
        """
        with error_boundary("Failed to load user data.", StoreReadError):
            try:
                state = AppStateDocument(user_id, store=self.store)
            except UserDataNotFoundError:
                default = default_app_state()
                self.store.set(user_id, default)
                logger.info(f"Created empty state for user {user_id}")
                return default
            return state.raw

    def set_active_goal(self, user_id: str, goal_id: Optional[str]):
        with error_boundary("Failed to set active goal."):
            self.store.update(user_id, {"activeGoalId": goal_id})
        logger.info(f"Active goal of user {user_id} set to {goal_id}")

    def reset_user_data(self, user_id: str) -> Dict[str, Any]:
        """Overwrite the whole state with an empty one. This is destructive."""
        default = default_app_state()
        with error_boundary("Failed to reset user data."):
            self.store.set(user_id, default)
        logger.warning(f"Reset all data of user {user_id}")
        return default

    def set_user_data(self, user_id: str, state: Dict[str, Any]):
        """Overwrite the whole state document with ``state``."""
        with error_boundary("Failed to set user data during import."):
            AppStateDocument(user_id, store=self.store, doc=state)
            self.store.set(user_id, state)

    def import_goals(self, user_id: str, goals: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Add already deserialized goals next to the existing ones.

        Imported goals never become active: an ``active`` status is changed
        to ``paused``. All goals are written in one update and existing goals
        are left untouched.

        Args:
            user_id: Current user
            goals: Goals with fresh ids, as returned by deserialize_goals_for_import

        Returns:
            The goals as written
        """
        with error_boundary("Failed to import goals."):
            self.get_user_data(user_id)
            stamp = now()
            field_map = {}
            written = []
            for goal in goals:
                path = goal_path(goal.get("id"))
                if goal.get("status") == GoalStatus.ACTIVE.value:
                    goal = {**goal, "status": GoalStatus.PAUSED.value, "updatedAt": stamp}
                field_map[path] = goal
                written.append(goal)

            if field_map:
                self.store.update(user_id, field_map)

        logger.info(f"Imported {len(written)} goals for user {user_id}")
        return written
