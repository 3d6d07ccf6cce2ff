"""Exceptions package initialization."""

from .CustomError import (
    ServiceErrorCode,
    ServiceError,
    UserDataNotFoundError,
    GoalNotFoundError,
    FinanceDataNotFoundError,
    DailyProgressNotFoundError,
    NoAuthenticatedUserError,
    ProfileUpdateError,
    StoreReadError,
    StoreWriteError,
    ValidationError,
    ImportValidationError,
)

__all__ = [
    "ServiceErrorCode",
    "ServiceError",
    "UserDataNotFoundError",
    "GoalNotFoundError",
    "FinanceDataNotFoundError",
    "DailyProgressNotFoundError",
    "NoAuthenticatedUserError",
    "ProfileUpdateError",
    "StoreReadError",
    "StoreWriteError",
    "ValidationError",
    "ImportValidationError",
]
