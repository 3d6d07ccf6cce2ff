"""Typed addressing of the lists nested inside a goal.

Every list write targets one of these paths, e.g. ``goals.<goalId>.toDoList``
or ``goals.<goalId>.financeData.assets``. Daily progress is a map keyed by
date instead, addressed as ``goals.<goalId>.dailyProgress.<YYYY-MM-DD>``.
"""

import re
from datetime import datetime
from enum import Enum
from typing import NamedTuple

from onegoal.exceptions import ValidationError


class ListField(Enum):
    """A list inside a goal: (attribute name, lives under financeData)."""

    TODO_LIST = ("toDoList", False)
    NOT_TODO_LIST = ("notToDoList", False)
    STICKY_NOTES = ("stickyNotes", False)
    RESOURCES = ("resources", False)
    TIME_BLOCKS = ("timeBlocks", False)
    STARRED_QUOTES = ("starredQuotes", False)
    SUBSCRIPTIONS = ("subscriptions", True)
    ASSETS = ("assets", True)
    LIABILITIES = ("liabilities", True)
    TRANSACTIONS = ("transactions", True)
    BUDGETS = ("budgets", True)

    def __init__(self, attribute: str, in_finance_data: bool):
        self.attribute = attribute
        self.in_finance_data = in_finance_data

    @property
    def relative_path(self) -> str:
        if self.in_finance_data:
            return f"financeData.{self.attribute}"
        return self.attribute


def goal_path(goal_id: str) -> str:
    """Path of one goal in the goals map."""
    if not goal_id or "." in goal_id:
        raise ValidationError(f"Invalid goal ID {goal_id!r}.", field="goalId")
    return f"goals.{goal_id}"


class GoalFieldPath(NamedTuple):
    """One list field of one goal."""

    goal_id: str
    field: ListField

    def dotted(self) -> str:
        """Render the dot-separated path used for partial document updates."""
        return f"{goal_path(self.goal_id)}.{self.field.relative_path}"


DATE_KEY_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def check_date_key(date_key: str) -> str:
    """Return ``date_key`` if it is a real calendar date as YYYY-MM-DD."""
    message = f"Invalid date {date_key!r}."
    if not isinstance(date_key, str) or not DATE_KEY_PATTERN.match(date_key):
        raise ValidationError(message, field="date")
    try:
        datetime.strptime(date_key, "%Y-%m-%d")
    except ValueError as e:
        raise ValidationError(message, field="date", cause=e) from e
    return date_key


class DailyProgressPath(NamedTuple):
    """The progress entry of one goal for one day."""

    goal_id: str
    date_key: str

    def dotted(self) -> str:
        return f"{goal_path(self.goal_id)}.dailyProgress.{check_date_key(self.date_key)}"


def goal_updated_at_path(goal_id: str) -> str:
    return f"{goal_path(goal_id)}.updatedAt"

