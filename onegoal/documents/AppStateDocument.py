from typing import Any, Dict, List, Optional

from onegoal.apis.DocumentStore import DocumentStore
from onegoal.documents.DocumentBase import DocumentBase
from onegoal.exceptions import (
    FinanceDataNotFoundError,
    GoalNotFoundError,
    UserDataNotFoundError,
)
from onegoal.models.field_paths import ListField
from onegoal.models.firestore_types import AppStateDoc, FinanceDataDoc, GoalDoc


class AppStateDocument(DocumentBase[AppStateDoc]):
    """The aggregate state document of one user.

    Every list mutation starts here: the document is read fresh, then the
    target goal is located in its ``goals`` map. Nothing is written.
    """
    pydantic_model = AppStateDoc
    read_error_message = "Failed to load user data."

    def __init__(self, user_id: str, store: Optional[DocumentStore] = None, doc: dict | None = None):
        super().__init__(user_id, store=store, doc=doc)

    @property
    def user_id(self) -> str:
        return self.id

    def _on_missing(self):
        raise UserDataNotFoundError(self.id)

    def locate_goal(self, goal_id: str) -> GoalDoc:
        goal = self.doc.goals.get(goal_id)
        if goal is None:
            raise GoalNotFoundError(goal_id)
        return goal

    def locate_finance_data(self, goal_id: str) -> FinanceDataDoc:
        goal = self.locate_goal(goal_id)
        if goal.financeData is None:
            raise FinanceDataNotFoundError(goal_id)
        return goal.financeData

    def read_list(
        self, goal_id: str, field: ListField, require_finance_data: bool = True
    ) -> List[Dict[str, Any]]:
        """Current contents of one list, as a fresh shallow copy.

        A goal without finance data reads as empty finance lists when
        ``require_finance_data`` is False.
        """
        if field.in_finance_data:
            goal = self.locate_goal(goal_id)
            if goal.financeData is None and not require_finance_data:
                return []
            container = self.locate_finance_data(goal_id)
        else:
            container = self.locate_goal(goal_id)
        items = getattr(container, field.attribute, None) or []
        return [dict(item) if isinstance(item, dict) else item for item in items]

    def read_daily_progress(self, goal_id: str, date_key: str) -> Optional[Dict[str, Any]]:
        """Copy of the goal's progress entry for ``date_key``, or None."""
        entry = self.locate_goal(goal_id).dailyProgress.get(date_key)
        return dict(entry) if entry is not None else None
