"""Read-modify-write of one list inside a goal."""

import uuid
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.documents.lists.ListKind import InsertionPolicy, ListKind
from onegoal.exceptions import ValidationError
from onegoal.models.field_paths import GoalFieldPath
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import now

logger = get_logger(__name__)

# Set once by add, never changed afterwards
IMMUTABLE_FIELDS = ("id", "createdAt")


class GoalListMutator:
    """Add, update, delete and reorder items of one goal list.

    Every operation except ``reorder`` re-reads the user document, locates
    the goal and writes the complete new list back to a single field path.
    There is no version check, so concurrent writers to the same list race
    and the last write wins.
    """

    def __init__(self, kind: ListKind, store: Optional[DocumentStore] = None):
        self.kind = kind
        self.store = store or FirestoreDocumentStore()

    def _path(self, goal_id: str) -> str:
        return GoalFieldPath(goal_id, self.kind.field).dotted()

    def _load(self, user_id: str, goal_id: str):
        state = AppStateDocument(user_id, store=self.store)
        items = state.read_list(
            goal_id, self.kind.field, require_finance_data=self.kind.require_finance_data
        )
        return state, items

    def _build(self, fields: Dict[str, Any], stamp) -> Dict[str, Any]:
        data = {k: v for k, v in fields.items() if k not in ("id", "createdAt", "updatedAt")}
        data["id"] = str(uuid.uuid4())
        data["createdAt"] = stamp
        data["updatedAt"] = stamp
        if self.kind.insertion is InsertionPolicy.PREPEND_RENUMBER:
            data["order"] = 0

        return self._validate(data, f"New {self.kind.label} data is invalid.").model_dump()

    def _validate(self, data: Dict[str, Any], message: str):
        try:
            return self.kind.model.model_validate(data)
        except PydanticValidationError as e:
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise ValidationError(message, details={"errors": errors}, cause=e) from e

    def add(self, user_id: str, goal_id: str, fields: Dict[str, Any]) -> Dict[str, Any]:
        """Create an item from ``fields`` over the kind's defaults.

        Args:
            user_id: Owner of the aggregate document
            goal_id: Goal holding the list
            fields: Caller-supplied fields; id and timestamps are ignored

        Returns:
            The stored item
        """
        with error_boundary(f"Failed to add {self.kind.label}."):
            path = self._path(goal_id)
            state, items = self._load(user_id, goal_id)
            stamp = now()
            item = self._build(fields, stamp)

            if self.kind.insertion is InsertionPolicy.PREPEND_RENUMBER:
                shifted = [
                    {**existing, "order": existing.get("order", 0) + 1, "updatedAt": stamp}
                    for existing in items
                ]
                new_list = [item] + shifted
            else:
                new_list = items + [item]

            state.update_doc({path: new_list})

        logger.info(f"Added {self.kind.label} {item['id']} to goal {goal_id} of user {user_id}")
        return item

    def update(
        self, user_id: str, goal_id: str, item_id: str, updates: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """Merge ``updates`` into the item with ``item_id``.

        An unknown ``item_id`` writes the list back unchanged and returns None.
        A merge the kind's model rejects raises ``ValidationError`` and
        writes nothing.
        """
        with error_boundary(f"Failed to update {self.kind.label} {item_id}."):
            path = self._path(goal_id)
            state, items = self._load(user_id, goal_id)
            changes = {k: v for k, v in updates.items() if k not in IMMUTABLE_FIELDS}
            stamp = now()

            updated = None
            new_list = []
            for item in items:
                if isinstance(item, dict) and item.get("id") == item_id:
                    merged = {**item, **changes, "updatedAt": stamp}
                    if self.kind.on_update:
                        merged.update(self.kind.on_update(item, changes, stamp))
                    self._validate(merged, f"Updated {self.kind.label} data is invalid.")
                    updated = merged
                    new_list.append(merged)
                else:
                    new_list.append(item)

            if updated is None:
                logger.warning(
                    f"{self.kind.label} {item_id} not in goal {goal_id}; writing list unchanged"
                )
            state.update_doc({path: new_list})

        logger.info(f"Updated {self.kind.label} {item_id} in goal {goal_id} of user {user_id}")
        return updated

    def delete(self, user_id: str, goal_id: str, item_id: str) -> bool:
        """Remove the item with ``item_id``. Returns whether it was present."""
        with error_boundary(f"Failed to delete {self.kind.label} {item_id}."):
            path = self._path(goal_id)
            state, items = self._load(user_id, goal_id)
            new_list = [
                item for item in items
                if not (isinstance(item, dict) and item.get("id") == item_id)
            ]
            state.update_doc({path: new_list})

        removed = len(new_list) != len(items)
        logger.info(
            f"Deleted {self.kind.label} {item_id} from goal {goal_id} of user {user_id} (removed={removed})"
        )
        return removed

    def reorder(self, user_id: str, goal_id: str, ordered_items: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """Overwrite the list with the caller's ordering.

        Nothing is read first and the list is not validated: the caller must
        pass every item, already in order.
        """
        with error_boundary(f"Failed to reorder {self.kind.list_label} for goal {goal_id}."):
            path = self._path(goal_id)
            stamp = now()
            new_list = [{**item, "updatedAt": stamp} for item in ordered_items]
            self.store.update(user_id, {path: new_list})

        logger.info(f"Reordered {len(new_list)} items of {self.kind.list_label} in goal {goal_id}")
        return new_list
