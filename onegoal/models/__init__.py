"""Models package initialization."""

from .firestore_types import (
    BaseEntityDoc,
    TodoItemDoc,
    DistractionItemDoc,
    StickyNoteDoc,
    ResourceDoc,
    TimeBlockDoc,
    SubscriptionDoc,
    AssetDoc,
    LiabilityDoc,
    TransactionDoc,
    BudgetDoc,
    FinanceDataDoc,
    GoalDoc,
    AppStateDoc,
    SerializedGoal,
)
from .field_paths import ListField, GoalFieldPath, goal_path
from .util_types import (
    GoalStatus,
    StickyNoteColor,
    ResourceType,
    BillingCycle,
    AssetType,
    LiabilityType,
    TransactionType,
    BudgetPeriod,
)

__all__ = [
    # Firestore types
    "BaseEntityDoc",
    "TodoItemDoc",
    "DistractionItemDoc",
    "StickyNoteDoc",
    "ResourceDoc",
    "TimeBlockDoc",
    "SubscriptionDoc",
    "AssetDoc",
    "LiabilityDoc",
    "TransactionDoc",
    "BudgetDoc",
    "FinanceDataDoc",
    "GoalDoc",
    "AppStateDoc",
    "SerializedGoal",
    # Field paths
    "ListField",
    "GoalFieldPath",
    "goal_path",
    # Utility types
    "GoalStatus",
    "StickyNoteColor",
    "ResourceType",
    "BillingCycle",
    "AssetType",
    "LiabilityType",
    "TransactionType",
    "BudgetPeriod",
]
