"""Document store contract used by the goal services, and its Firestore implementation."""

from typing import Any, Dict, Optional, Protocol

from google.cloud.firestore_v1 import ArrayRemove, ArrayUnion

from onegoal.apis.Db import Db
from onegoal.util.logger import get_logger

logger = get_logger(__name__)


class DocumentStore(Protocol):
    """One JSON-shaped document per user, keyed by user id.

    ``update`` keys are dot-separated field paths; each value fully replaces
    the value at its path and leaves sibling fields untouched.
    """

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        ...

    def update(self, user_id: str, field_map: Dict[str, Any]) -> None:
        ...

    def set(self, user_id: str, data: Dict[str, Any]) -> None:
        ...

    def atomic_add_to_set(self, user_id: str, field_path: str, value: Any) -> None:
        ...

    def atomic_remove_from_set(self, user_id: str, field_path: str, value: Any) -> None:
        ...


class FirestoreDocumentStore:
    """DocumentStore backed by the ``users`` collection.

    Library errors propagate unchanged; services wrap them.
    """

    def __init__(self, db: Optional[Db] = None):
        self._db = db

    @property
    def db(self) -> Db:
        if self._db is None:
            self._db = Db.get_instance()
        return self._db

    def _doc_ref(self, user_id: str):
        return self.db.collections["users"].document(user_id)

    def get(self, user_id: str) -> Optional[Dict[str, Any]]:
        snapshot = self._doc_ref(user_id).get()
        if not snapshot.exists:
            return None
        return snapshot.to_dict() or {}

    def update(self, user_id: str, field_map: Dict[str, Any]) -> None:
        self._doc_ref(user_id).update(field_map)
        logger.debug(f"Updated {sorted(field_map)} on user {user_id}")

    def set(self, user_id: str, data: Dict[str, Any]) -> None:
        self._doc_ref(user_id).set(data)

    def atomic_add_to_set(self, user_id: str, field_path: str, value: Any) -> None:
        self._doc_ref(user_id).update({field_path: ArrayUnion([value])})

    def atomic_remove_from_set(self, user_id: str, field_path: str, value: Any) -> None:
        self._doc_ref(user_id).update({field_path: ArrayRemove([value])})
