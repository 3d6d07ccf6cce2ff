"""Stopwatch sessions logged in a goal's daily progress."""

import uuid
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from onegoal.apis.DocumentStore import DocumentStore, FirestoreDocumentStore
from onegoal.documents.AppStateDocument import AppStateDocument
from onegoal.exceptions import DailyProgressNotFoundError, ValidationError
from onegoal.models.field_paths import DailyProgressPath, goal_updated_at_path
from onegoal.models.firestore_types import StopwatchSessionDoc
from onegoal.services.daily_progress_service import (
    empty_daily_progress,
    parse_daily_progress,
    session_date_key,
    total_duration,
)
from onegoal.util.error_boundary import error_boundary
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import now

logger = get_logger(__name__)


class StopwatchService:
    """Add, relabel and delete stopwatch sessions.

    A session belongs to the day it started (UTC). Every write keeps that
    day's ``totalSessionDuration`` equal to the sum of its session
    durations and stamps the goal's ``updatedAt``.
    """

    def __init__(self, store: Optional[DocumentStore] = None):
        self.store = store or FirestoreDocumentStore()

    def _load(self, user_id: str, goal_id: str, date_key: str):
        state = AppStateDocument(user_id, store=self.store)
        return state, state.read_daily_progress(goal_id, date_key)

    @staticmethod
    def _stored(raw: Dict[str, Any], date_key: str) -> Dict[str, Any]:
        return parse_daily_progress(raw, date_key, f"Stored progress for {date_key} is malformed.")

    def add_stopwatch_session(self, user_id: str, goal_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        """Log a finished session under the day of its ``startTime``.

        A day without an entry gets a default one first.

        Args:
            user_id: Owner of the aggregate document
            goal_id: Goal the session counts toward
            data: ``startTime``, ``label`` and ``duration`` in milliseconds

        Returns:
            The new session
        """
        with error_boundary(f"Failed to add stopwatch session for goal {goal_id}."):
            stamp = now()
            fields = {k: v for k, v in data.items() if k not in ("id", "createdAt", "updatedAt")}
            try:
                session = StopwatchSessionDoc.model_validate({
                    **fields, "id": str(uuid.uuid4()), "createdAt": stamp, "updatedAt": stamp,
                }).model_dump()
            except PydanticValidationError as e:
                errors = e.errors(include_url=False, include_context=False, include_input=False)
                raise ValidationError(
                    "New stopwatch session data is invalid.", details={"errors": errors}, cause=e
                ) from e

            date_key = session_date_key(session["startTime"])
            path = DailyProgressPath(goal_id, date_key).dotted()
            state, raw = self._load(user_id, goal_id, date_key)
            progress = self._stored(raw, date_key) if raw is not None else empty_daily_progress(date_key)
            progress["sessions"] = progress["sessions"] + [session]
            progress["totalSessionDuration"] = total_duration(progress["sessions"])

            state.update_doc({path: progress, goal_updated_at_path(goal_id): stamp})

        logger.info(f"Added stopwatch session {session['id']} on {date_key} to goal {goal_id}")
        return session

    def update_stopwatch_session(
        self, user_id: str, goal_id: str, date_key: str, session_id: str, label: str
    ) -> Optional[Dict[str, Any]]:
        """Relabel a session. Durations and the day's total are unchanged.

        An unknown ``session_id`` writes the sessions back unchanged and
        returns None.
        """
        if not isinstance(label, str) or not label.strip():
            raise ValidationError("Session label cannot be empty.", field="label")

        with error_boundary(f"Failed to update stopwatch session {session_id}."):
            day = DailyProgressPath(goal_id, date_key).dotted()
            state, raw = self._load(user_id, goal_id, date_key)
            if raw is None:
                raise DailyProgressNotFoundError(goal_id, date_key)
            progress = self._stored(raw, date_key)
            stamp = now()

            updated = None
            sessions = []
            for session in progress["sessions"]:
                if session["id"] == session_id:
                    session = {**session, "label": label, "updatedAt": stamp}
                    updated = session
                sessions.append(session)

            if updated is None:
                logger.warning(f"Stopwatch session {session_id} not on {date_key}; writing sessions unchanged")
            state.update_doc({
                f"{day}.sessions": sessions,
                goal_updated_at_path(goal_id): stamp,
            })

        logger.info(f"Updated stopwatch session {session_id} on {date_key} in goal {goal_id}")
        return updated

    def delete_stopwatch_session(self, user_id: str, goal_id: str, date_key: str, session_id: str) -> bool:
        """Remove a session and recompute the day's total. Returns whether it was present."""
        with error_boundary(f"Failed to delete stopwatch session {session_id}."):
            day = DailyProgressPath(goal_id, date_key).dotted()
            state, raw = self._load(user_id, goal_id, date_key)
            if raw is None:
                raise DailyProgressNotFoundError(goal_id, date_key)
            sessions = self._stored(raw, date_key)["sessions"]
            remaining = [session for session in sessions if session["id"] != session_id]

            state.update_doc({
                f"{day}.sessions": remaining,
                f"{day}.totalSessionDuration": total_duration(remaining),
                goal_updated_at_path(goal_id): now(),
            })

        removed = len(remaining) != len(sessions)
        logger.info(
            f"Deleted stopwatch session {session_id} on {date_key} from goal {goal_id} (removed={removed})"
        )
        return removed
