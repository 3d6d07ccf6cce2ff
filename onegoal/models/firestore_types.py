"""Firestore document type definitions using Pydantic.

The whole user state is one document (``users/{uid}``). Goals live in its
``goals`` map and every sub-list lives inside a goal, so the entity types
below are never stored as documents of their own.
"""

from datetime import datetime
from typing import Optional, List, Dict, Any
from pydantic import BaseModel, ConfigDict, Field, field_validator

from onegoal.models.util_types import (
    AssetType,
    BillingCycle,
    BudgetPeriod,
    LiabilityType,
    ResourceType,
    RoutineLogStatus,
    RoutineType,
    SatisfactionLevel,
    StickyNoteColor,
    TransactionType,
)


class BaseEntityDoc(BaseModel):
    """Base type for every item stored inside a goal list."""

    model_config = ConfigDict(use_enum_values=True)

    id: str = Field(min_length=1)
    createdAt: datetime
    updatedAt: datetime


class TodoItemDoc(BaseEntityDoc):
    """Task toward the goal. ``order`` is contiguous from 0."""

    text: str = Field(min_length=1)
    description: Optional[str] = None
    order: int = 0
    completed: bool = False
    completedAt: Optional[datetime] = None
    deadline: Optional[datetime] = None


class DistractionItemDoc(BaseEntityDoc):
    """Something to avoid doing."""

    title: str = Field(min_length=1)
    description: Optional[str] = None
    triggerPatterns: List[str] = Field(default_factory=list)
    count: int = Field(default=0, ge=0)


class StickyNoteDoc(BaseEntityDoc):
    title: str = Field(min_length=1)
    content: str = ""
    color: StickyNoteColor = StickyNoteColor.YELLOW


class ResourceDoc(BaseEntityDoc):
    url: str = Field(min_length=1)
    title: str = Field(min_length=1)
    description: Optional[str] = None
    type: ResourceType = ResourceType.OTHER


class TimeBlockDoc(BaseEntityDoc):
    label: str = Field(min_length=1)
    startTime: str = Field(pattern=r"^\d{2}:\d{2}$")
    endTime: str = Field(pattern=r"^\d{2}:\d{2}$")
    color: str = Field(min_length=1)
    completed: bool = False
    completedAt: Optional[datetime] = None


class SubscriptionDoc(BaseEntityDoc):
    """Recurring payment tracked under a goal's finance data."""

    name: str = Field(min_length=1)
    amount: float = Field(ge=0)
    billingCycle: BillingCycle = BillingCycle.MONTHLY
    nextBillingDate: datetime
    endDate: Optional[datetime] = None
    cancellationUrl: Optional[str] = None
    notes: Optional[str] = None
    budgetId: Optional[str] = None


class AssetDoc(BaseEntityDoc):
    name: str = Field(min_length=1)
    amount: float = Field(ge=0)
    type: AssetType = AssetType.CASH
    notes: Optional[str] = None


class LiabilityDoc(BaseEntityDoc):
    name: str = Field(min_length=1)
    amount: float = Field(ge=0)
    type: LiabilityType = LiabilityType.OTHER
    notes: Optional[str] = None


class TransactionDoc(BaseEntityDoc):
    description: str = Field(min_length=1)
    amount: float = Field(ge=0)
    type: TransactionType = TransactionType.EXPENSE
    budgetId: Optional[str] = None
    date: datetime


class BudgetDoc(BaseEntityDoc):
    category: str = Field(min_length=1)
    amount: float = Field(ge=0)
    period: BudgetPeriod = BudgetPeriod.MONTHLY
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None


class StopwatchSessionDoc(BaseEntityDoc):
    """A timed focus session. ``duration`` is in milliseconds."""

    startTime: datetime
    label: str = Field(min_length=1)
    duration: float = Field(ge=0)


class DailyProgressDoc(BaseModel):
    """One day's log of a goal, stored under ``dailyProgress.<date>``.

    ``totalSessionDuration`` is the sum of the session durations and is
    recomputed on every write.
    """

    model_config = ConfigDict(use_enum_values=True)

    date: str = Field(pattern=r"^\d{4}-\d{2}-\d{2}$")
    satisfaction: SatisfactionLevel = SatisfactionLevel.NEUTRAL
    notes: str = ""
    sessions: List[StopwatchSessionDoc] = Field(default_factory=list)
    routines: Dict[str, RoutineLogStatus] = Field(default_factory=dict, validate_default=True)
    totalSessionDuration: float = Field(default=0, ge=0)
    weight: Optional[float] = Field(default=None, gt=0)

    @field_validator("date")
    @classmethod
    def _calendar_date(cls, value):
        datetime.strptime(value, "%Y-%m-%d")
        return value

    @field_validator("routines")
    @classmethod
    def _every_routine_logged(cls, value):
        known = {routine.value for routine in RoutineType}
        unknown = set(value) - known
        if unknown:
            raise ValueError(f"unknown routines: {sorted(unknown)}")
        return {name: value.get(name, RoutineLogStatus.NOT_LOGGED.value) for name in sorted(known)}

    @field_validator("sessions", "routines", mode="before")
    @classmethod
    def _null_as_empty(cls, value, info):
        if value is None:
            return [] if info.field_name == "sessions" else {}
        return value


class FinanceDataDoc(BaseModel):
    """Finance sub-lists of a goal. Items are kept as raw dicts."""

    model_config = ConfigDict(extra="allow")

    transactions: List[Dict[str, Any]] = Field(default_factory=list)
    budgets: List[Dict[str, Any]] = Field(default_factory=list)
    subscriptions: List[Dict[str, Any]] = Field(default_factory=list)
    assets: List[Dict[str, Any]] = Field(default_factory=list)
    liabilities: List[Dict[str, Any]] = Field(default_factory=list)
    netWorthHistory: List[Dict[str, Any]] = Field(default_factory=list)

    @field_validator("*", mode="before")
    @classmethod
    def _null_list_as_empty(cls, value):
        return [] if value is None else value


class GoalDoc(BaseModel):
    """A goal as read from the aggregate document.

    Parsing is deliberately lenient: list items stay raw dicts so that a
    mutator writes back exactly what it read, plus its own change.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    startDate: Optional[datetime] = None
    endDate: Optional[datetime] = None
    status: Optional[str] = None
    createdAt: Optional[datetime] = None
    updatedAt: Optional[datetime] = None
    dailyProgress: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
    toDoList: List[Dict[str, Any]] = Field(default_factory=list)
    notToDoList: List[Dict[str, Any]] = Field(default_factory=list)
    stickyNotes: List[Dict[str, Any]] = Field(default_factory=list)
    resources: List[Dict[str, Any]] = Field(default_factory=list)
    timeBlocks: List[Dict[str, Any]] = Field(default_factory=list)
    starredQuotes: List[Any] = Field(default_factory=list)
    financeData: Optional[FinanceDataDoc] = None

    @field_validator(
        "toDoList", "notToDoList", "stickyNotes", "resources", "timeBlocks", "starredQuotes",
        mode="before",
    )
    @classmethod
    def _null_list_as_empty(cls, value):
        return [] if value is None else value

    @field_validator("dailyProgress", mode="before")
    @classmethod
    def _null_map_as_empty(cls, value):
        return {} if value is None else value


class AppStateDoc(BaseModel):
    """Root state of one user, stored as a single document."""

    activeGoalId: Optional[str] = None
    goals: Dict[str, GoalDoc] = Field(default_factory=dict)


class SerializedGoal(BaseModel):
    """Shape an imported goal must have before it is deserialized."""

    model_config = ConfigDict(extra="allow")

    name: str
    description: Optional[str] = None
    toDoList: List[Dict[str, Any]] = Field(default_factory=list)
    notToDoList: List[Dict[str, Any]] = Field(default_factory=list)
    stickyNotes: List[Dict[str, Any]] = Field(default_factory=list)
    starredQuotes: List[Any] = Field(default_factory=list)
    dailyProgress: Dict[str, Any] = Field(default_factory=dict)
