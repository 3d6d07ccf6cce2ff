"""Custom exception classes for the goal services."""

from enum import Enum
from typing import Optional, Dict, Any


class ServiceErrorCode(str, Enum):
    """Error codes carried by every ServiceError."""
    # Authentication
    AUTH_REQUIRED = "AUTH_REQUIRED"
    AUTH_PROFILE_UPDATE_FAILED = "AUTH_PROFILE_UPDATE_FAILED"

    # Validation
    VALIDATION_FAILED = "VALIDATION_FAILED"
    INVALID_INPUT = "INVALID_INPUT"

    # Firestore / data
    NOT_FOUND = "NOT_FOUND"
    OPERATION_FAILED = "OPERATION_FAILED"

    UNKNOWN_ERROR = "UNKNOWN_ERROR"


class ServiceError(Exception):
    """Base exception for everything a service call can raise.

    Callers only ever observe this type (or a subclass). The underlying
    library error, if any, is kept on ``cause`` for logging.
    """

    def __init__(
        self,
        message: str,
        code: ServiceErrorCode = ServiceErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        """Initialize ServiceError.

        Args:
            message: Short, user-presentable error message
            code: Error code
            details: Optional additional error details
            cause: Optional original exception
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause


class UserDataNotFoundError(ServiceError):
    """Raised when the aggregate user document does not exist."""

    def __init__(self, user_id: str):
        super().__init__(
            "User data not found.",
            code=ServiceErrorCode.NOT_FOUND,
            details={"resource_type": "user", "resource_id": user_id},
        )


class GoalNotFoundError(ServiceError):
    """Raised when a goal id is absent from the goals map."""

    def __init__(self, goal_id: str):
        super().__init__(
            f"Goal with ID {goal_id} not found.",
            code=ServiceErrorCode.NOT_FOUND,
            details={"resource_type": "goal", "resource_id": goal_id},
        )


class FinanceDataNotFoundError(ServiceError):
    """Raised when a goal exists but carries no finance data."""

    def __init__(self, goal_id: str):
        super().__init__(
            f"Finance data for goal ID {goal_id} not found.",
            code=ServiceErrorCode.NOT_FOUND,
            details={"resource_type": "financeData", "resource_id": goal_id},
        )


class DailyProgressNotFoundError(ServiceError):
    """Raised when a goal has no progress entry for the given day."""

    def __init__(self, goal_id: str, date_key: str):
        super().__init__(
            f"No progress found for date {date_key}.",
            code=ServiceErrorCode.NOT_FOUND,
            details={"resource_type": "dailyProgress", "resource_id": f"{goal_id}/{date_key}"},
        )


class NoAuthenticatedUserError(ServiceError):
    """Raised when a profile-style mutation runs without an identity."""

    def __init__(self, message: str = "No authenticated user found to update profile."):
        super().__init__(message, code=ServiceErrorCode.AUTH_REQUIRED)


class ProfileUpdateError(ServiceError):
    """Raised when the identity provider rejects a profile update."""

    def __init__(self, message: str = "Failed to update user profile.", cause: Optional[BaseException] = None):
        super().__init__(message, code=ServiceErrorCode.AUTH_PROFILE_UPDATE_FAILED, cause=cause)


class StoreReadError(ServiceError):
    """Raised when reading from the document store fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code=ServiceErrorCode.OPERATION_FAILED, cause=cause)


class StoreWriteError(ServiceError):
    """Raised when writing to the document store fails."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message, code=ServiceErrorCode.OPERATION_FAILED, cause=cause)


class ValidationError(ServiceError):
    """Raised when validation fails."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ):
        """Initialize ValidationError.

        Args:
            message: Error message
            field: Optional field that failed validation
            details: Optional additional error details
            cause: Optional original exception (e.g. a pydantic error)
        """
        if field:
            details = details or {}
            details["field"] = field

        super().__init__(
            message, code=ServiceErrorCode.VALIDATION_FAILED, details=details, cause=cause
        )


class ImportValidationError(ValidationError):
    """Raised when an import payload is not an array of goal-shaped objects."""

    def __init__(
        self,
        message: str = "Import failed. Invalid file format.",
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, cause=cause)
