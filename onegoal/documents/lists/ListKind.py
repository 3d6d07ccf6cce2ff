"""Configuration records describing each kind of goal list."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type

from onegoal.models.field_paths import ListField
from onegoal.models.firestore_types import (
    AssetDoc,
    BaseEntityDoc,
    BudgetDoc,
    DistractionItemDoc,
    LiabilityDoc,
    ResourceDoc,
    StickyNoteDoc,
    SubscriptionDoc,
    TimeBlockDoc,
    TodoItemDoc,
    TransactionDoc,
)

# (current item, caller updates, timestamp) -> extra fields to merge
UpdateHook = Callable[[Dict[str, Any], Dict[str, Any], datetime], Dict[str, Any]]


class InsertionPolicy(Enum):
    """Where a new item goes."""
    PREPEND_RENUMBER = "prepend_renumber"
    APPEND = "append"


def completion_hook(current: Dict[str, Any], updates: Dict[str, Any], stamp: datetime) -> Dict[str, Any]:
    """Keep ``completedAt`` in step with ``completed``.

    false -> true stamps it, anything -> false clears it, true -> true keeps it.
    """
    if "completed" not in updates:
        return {}
    if not updates["completed"]:
        return {"completedAt": None}
    if not current.get("completed"):
        return {"completedAt": stamp}
    return {}


@dataclass(frozen=True)
class ListKind:
    """Everything the generic mutator needs to know about one list."""
    field: ListField
    model: Type[BaseEntityDoc]
    label: str
    insertion: InsertionPolicy = InsertionPolicy.APPEND
    on_update: Optional[UpdateHook] = None
    require_finance_data: bool = True
    list_name: Optional[str] = None

    @property
    def list_label(self) -> str:
        return self.list_name or f"{self.label} list"


TODO_ITEMS = ListKind(
    field=ListField.TODO_LIST,
    model=TodoItemDoc,
    label="to-do item",
    list_name="to-do list",
    insertion=InsertionPolicy.PREPEND_RENUMBER,
    on_update=completion_hook,
)

DISTRACTION_ITEMS = ListKind(
    field=ListField.NOT_TODO_LIST,
    model=DistractionItemDoc,
    label="distraction item",
)

STICKY_NOTES = ListKind(
    field=ListField.STICKY_NOTES,
    model=StickyNoteDoc,
    label="sticky note",
)

RESOURCES = ListKind(
    field=ListField.RESOURCES,
    model=ResourceDoc,
    label="resource",
)

TIME_BLOCKS = ListKind(
    field=ListField.TIME_BLOCKS,
    model=TimeBlockDoc,
    label="time block",
    on_update=completion_hook,
)

SUBSCRIPTIONS = ListKind(
    field=ListField.SUBSCRIPTIONS,
    model=SubscriptionDoc,
    label="subscription",
)

ASSETS = ListKind(
    field=ListField.ASSETS,
    model=AssetDoc,
    label="asset",
)

LIABILITIES = ListKind(
    field=ListField.LIABILITIES,
    model=LiabilityDoc,
    label="liability",
)

TRANSACTIONS = ListKind(
    field=ListField.TRANSACTIONS,
    model=TransactionDoc,
    label="transaction",
)

# Missing finance data reads as empty lists
BUDGETS = ListKind(
    field=ListField.BUDGETS,
    model=BudgetDoc,
    label="budget",
    require_finance_data=False,
)
