"""Utility type definitions."""

from enum import Enum


class GoalStatus(str, Enum):
    """Goal lifecycle status."""
    ACTIVE = "active"
    PAUSED = "paused"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class StickyNoteColor(str, Enum):
    """Sticky note colors."""
    YELLOW = "yellow"
    BLUE = "blue"
    GREEN = "green"
    PINK = "pink"
    PURPLE = "purple"
    ORANGE = "orange"
    RED = "red"
    GRAY = "gray"


class ResourceType(str, Enum):
    """Kinds of goal resources."""
    ARTICLE = "article"
    VIDEO = "video"
    IMAGE = "image"
    AUDIO = "audio"
    DOC = "doc"
    OTHER = "other"


class BillingCycle(str, Enum):
    """Subscription billing cycles."""
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


class AssetType(str, Enum):
    """Asset categories."""
    CASH = "cash"
    BANK_ACCOUNT = "bank_account"
    INVESTMENT = "investment"
    REAL_ESTATE = "real_estate"
    VEHICLE = "vehicle"
    OTHER = "other"


class LiabilityType(str, Enum):
    """Liability categories."""
    LOAN = "loan"
    CREDIT_CARD = "credit_card"
    MORTGAGE = "mortgage"
    OTHER = "other"


class TransactionType(str, Enum):
    """Direction of a transaction."""
    INCOME = "income"
    EXPENSE = "expense"


class BudgetPeriod(str, Enum):
    """Budget periods."""
    MONTHLY = "monthly"
    CUSTOM = "custom"


class SatisfactionLevel(int, Enum):
    """How a day went, from the daily reflection."""
    VERY_UNSATISFIED = 1
    UNSATISFIED = 2
    NEUTRAL = 3
    SATISFIED = 4
    VERY_SATISFIED = 5


class RoutineType(str, Enum):
    SLEEP = "sleep"
    WATER = "water"
    EXERCISE = "exercise"
    MEAL = "meal"
    TEETH = "teeth"
    BATH = "bath"


class RoutineLogStatus(str, Enum):
    """Per-day state of one routine."""
    DONE = "done"
    SKIPPED = "skipped"
    NOT_LOGGED = "not_logged"
