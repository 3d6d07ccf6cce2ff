"""Export and import of goals as JSON.

Timestamps become ISO 8601 UTC strings on export and are parsed back on
import. Imported goals always get fresh ids so a re-import never collides
with the goals already stored.
"""

import json
import uuid
from typing import Any, Dict, List, Optional, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.config import get_import_max_bytes
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.exceptions import ImportValidationError
from onegoal.models.firestore_types import GoalDoc, SerializedGoal
from onegoal.services.goal_service import GoalService
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import deserialize_timestamps, serialize_timestamps

logger = get_logger(__name__)

_goals_adapter = TypeAdapter(List[SerializedGoal])
_goal_docs_adapter = TypeAdapter(List[GoalDoc])


def _format_size(limit: int) -> str:
    if limit >= 1024 * 1024:
        return f"{round(limit / (1024 * 1024), 1):g}MB"
    if limit >= 1024:
        return f"{round(limit / 1024, 1):g}KB"
    return f"{limit} bytes"


def serialize_goals_for_export(goals: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Replace every timestamp, at any depth, with its ISO 8601 string."""
    return serialize_timestamps(list(goals))


def deserialize_goals_for_import(imported: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """Parse ISO 8601 strings back to timestamps and give each goal a new id.

    Strings that only look like timestamps but name an impossible date are
    kept as strings.
    """
    deserialized = deserialize_timestamps(list(imported))
    return [{**goal, "id": str(uuid.uuid4())} for goal in deserialized]


def check_imported_goals(goals: List[Dict[str, Any]]) -> None:
    """Reject deserialized goals the stored-state model would not read back.

    A goal that passes the export schema but fails here (a date field that
    is not a timestamp, a non-string status, finance lists that are not
    lists) would make every later read of the user's document fail.
    """
    try:
        _goal_docs_adapter.validate_python(goals)
    except PydanticValidationError as e:
        logger.warning(f"Rejected imported goals: {e.error_count()} schema errors")
        raise ImportValidationError(cause=e) from e


def parse_import_payload(raw: Union[str, bytes], max_bytes: Optional[int] = None) -> List[Dict[str, Any]]:
    """Check an uploaded export file before it is deserialized.

    Args:
        raw: File contents
        max_bytes: Size limit, ONEGOAL_IMPORT_MAX_BYTES by default

    Returns:
        The parsed array of goal objects, unchanged

    Raises:
        ImportValidationError: If the file is too large, is not JSON, is not
            an array, or holds an element that is not goal-shaped
    """
    limit = max_bytes if max_bytes is not None else get_import_max_bytes()
    payload = raw.encode("utf-8") if isinstance(raw, str) else raw
    if len(payload) > limit:
        raise ImportValidationError(f"File is too large (max {_format_size(limit)}).")

    try:
        data = json.loads(payload)
    except (ValueError, UnicodeDecodeError) as e:
        raise ImportValidationError(cause=e) from e

    if not isinstance(data, list):
        raise ImportValidationError()

    try:
        _goals_adapter.validate_python(data)
    except PydanticValidationError as e:
        logger.warning(f"Rejected import payload: {e.error_count()} schema errors")
        raise ImportValidationError(cause=e) from e

    return data


class DataService:
    """Whole-account export and import for one user."""

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or FirestoreDocumentStore()
        self.goal_service = GoalService(self.store)

    def export_goals(self, user_id: str) -> List[Dict[str, Any]]:
        state = AppStateDocument(user_id, store=self.store)
        goals = list((state.raw.get("goals") or {}).values())
        logger.info(f"Exporting {len(goals)} goals of user {user_id}")
        return serialize_goals_for_export(goals)

    def export_goals_json(self, user_id: str) -> str:
        return json.dumps(self.export_goals(user_id), indent=2)

    def import_goals_json(self, user_id: str, raw: Union[str, bytes]) -> List[Dict[str, Any]]:
        """Validate, deserialize and store an export file. Returns the new goals."""
        data = parse_import_payload(raw)
        goals = deserialize_goals_for_import(data)
        check_imported_goals(goals)
        if not goals:
            logger.info(f"Import for user {user_id} contained no goals")
            return []
        return self.goal_service.import_goals(user_id, goals)
