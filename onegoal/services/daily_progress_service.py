"""Daily progress entries of a goal, keyed by date."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from pydantic import ValidationError as PydanticValidationError

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.exceptions import ValidationError
from onegoal.models.field_paths import DailyProgressPath, goal_updated_at_path
from onegoal.models.firestore_types import DailyProgressDoc
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import now

logger = get_logger(__name__)


def session_date_key(start_time: datetime) -> str:
    """Day a session belongs to: the UTC date of its start."""
    if start_time.tzinfo is None:
        start_time = start_time.replace(tzinfo=timezone.utc)
    return start_time.astimezone(timezone.utc).strftime("%Y-%m-%d")


def total_duration(sessions: List[Dict[str, Any]]) -> float:
    return sum(session.get("duration", 0) for session in sessions)


def parse_daily_progress(data: Dict[str, Any], date_key: str, message: str) -> Dict[str, Any]:
    """Validate a progress entry for ``date_key`` and return it as a dict.

    Missing fields get their defaults and every routine is listed.

    Raises:
        ValidationError: With ``message`` if the entry is not valid
    """
    try:
        entry = DailyProgressDoc.model_validate({**data, "date": date_key})
    except PydanticValidationError as e:
        errors = e.errors(include_url=False, include_context=False, include_input=False)
        raise ValidationError(message, details={"errors": errors}, cause=e) from e
    return entry.model_dump()


def empty_daily_progress(date_key: str) -> Dict[str, Any]:
    return DailyProgressDoc(date=date_key).model_dump()


class DailyProgressService:
    """Save the reflection and routine log of one day."""

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or FirestoreDocumentStore()

    def save_daily_progress(self, user_id: str, goal_id: str, progress: Dict[str, Any]) -> Dict[str, Any]:
        """Merge ``progress`` into the goal's entry for ``progress["date"]``.

        Fields the caller leaves out keep their stored value, or their
        default when the day has no entry yet. ``totalSessionDuration`` is
        recomputed from the sessions. The goal's ``updatedAt`` is stamped.

        Args:
            user_id: Owner of the aggregate document
            goal_id: Goal to log progress against
            progress: Entry fields; ``date`` (YYYY-MM-DD) is required

        Returns:
            The stored entry

        Raises:
            ValidationError: If the date is missing or the merged entry is invalid
            GoalNotFoundError: If the goal does not exist
        """
        date_key = (progress or {}).get("date")
        if not date_key:
            raise ValidationError("Progress data must include a date.", field="date")

        with error_boundary(f"Failed to save daily progress for goal {goal_id}."):
            path = DailyProgressPath(goal_id, date_key).dotted()
            state = AppStateDocument(user_id, store=self.store)
            current = state.read_daily_progress(goal_id, date_key) or {}
            entry = parse_daily_progress(
                {**current, **progress}, date_key, "Daily progress data is invalid."
            )
            entry["totalSessionDuration"] = total_duration(entry["sessions"])
            state.update_doc({path: entry, goal_updated_at_path(goal_id): now()})

        logger.info(f"Saved progress for {date_key} on goal {goal_id} of user {user_id}")
        return entry
