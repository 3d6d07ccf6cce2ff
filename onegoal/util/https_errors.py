"""Translation of service errors into callable function errors."""

from typing import Any, Dict

from firebase_functions import https_fn

from onegoal.exceptions import ServiceError, ServiceErrorCode

_FUNCTIONS_CODES = {
    ServiceErrorCode.NOT_FOUND: https_fn.FunctionsErrorCode.NOT_FOUND,
    ServiceErrorCode.VALIDATION_FAILED: https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
    ServiceErrorCode.INVALID_INPUT: https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
    ServiceErrorCode.AUTH_REQUIRED: https_fn.FunctionsErrorCode.UNAUTHENTICATED,
}


def to_https_error(error: ServiceError) -> https_fn.HttpsError:
    """Keep the user-facing message and code; drop the cause."""
    code = _FUNCTIONS_CODES.get(error.code, https_fn.FunctionsErrorCode.INTERNAL)
    details: Dict[str, Any] = {"code": error.code.value}
    details.update(error.details)
    return https_fn.HttpsError(code, error.message, details)


def require_field(data: Dict[str, Any], name: str) -> Any:
    """Value of a required request field, INVALID_ARGUMENT when missing."""
    value = (data or {}).get(name)
    if value is None or value == "":
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            f"{name} is required"
        )
    return value


def unknown_action(action: Any) -> https_fn.HttpsError:
    return https_fn.HttpsError(
        https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
        f"Unknown action: {action}"
    )


def require_object(data: Dict[str, Any], name: str, required: bool = True) -> Dict[str, Any]:
    """A request field that must be a JSON object.

    An absent optional field reads as an empty object.
    """
    if required:
        value = require_field(data, name)
    else:
        value = (data or {}).get(name)
        if value is None:
            return {}
    if not isinstance(value, dict):
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            f"{name} must be an object"
        )
    return value
