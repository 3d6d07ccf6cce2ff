"""Goal list kinds and their generic mutator."""

from .ListKind import (
    ListKind,
    InsertionPolicy,
    completion_hook,
    TODO_ITEMS,
    DISTRACTION_ITEMS,
    STICKY_NOTES,
    RESOURCES,
    TIME_BLOCKS,
    SUBSCRIPTIONS,
    ASSETS,
    LIABILITIES,
    TRANSACTIONS,
    BUDGETS,
)
from .GoalListMutator import GoalListMutator

__all__ = [
    "ListKind",
    "InsertionPolicy",
    "completion_hook",
    "GoalListMutator",
    "TODO_ITEMS",
    "DISTRACTION_ITEMS",
    "STICKY_NOTES",
    "RESOURCES",
    "TIME_BLOCKS",
    "SUBSCRIPTIONS",
    "ASSETS",
    "LIABILITIES",
    "TRANSACTIONS",
    "BUDGETS",
]
