"""Starred quotes of a goal."""

from typing import Optional, Union

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.models.field_paths import GoalFieldPath, ListField
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger

logger = get_logger(__name__)

QuoteId = Union[int, str]


class QuoteService:
    """Star and unstar quotes with atomic set operations.

    Nothing is read first and the goal is not checked for existence: a
    single ``ArrayUnion``/``ArrayRemove`` update is issued per call.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or FirestoreDocumentStore()

    def add_starred_quote(self, user_id: str, goal_id: str, quote_id: QuoteId):
        with error_boundary("Failed to star quote."):
            path = GoalFieldPath(goal_id, ListField.STARRED_QUOTES).dotted()
            self.store.atomic_add_to_set(user_id, path, quote_id)
        logger.info(f"Starred quote {quote_id} on goal {goal_id} of user {user_id}")

    def remove_starred_quote(self, user_id: str, goal_id: str, quote_id: QuoteId):
        with error_boundary("Failed to unstar quote."):
            path = GoalFieldPath(goal_id, ListField.STARRED_QUOTES).dotted()
            self.store.atomic_remove_from_set(user_id, path, quote_id)
        logger.info(f"Unstarred quote {quote_id} on goal {goal_id} of user {user_id}")
