"""Shared request handling for the callable functions."""

from typing import Any, Callable, Dict, Optional

from firebase_functions import https_fn

from onegoal.exceptions import ServiceError
from onegoal.util.cors_response import cors_response_on_call
from onegoal.util.db_auth_wrapper import db_auth_wrapper, optional_user_id
from onegoal.util.https_errors import to_https_error
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import serialize_timestamps

logger = get_logger(__name__)

Handler = Callable[[Optional[str], Dict[str, Any]], Any]


def run_callable(
    req: https_fn.CallableRequest,
    name: str,
    handler: Handler,
    require_auth: bool = True,
):
    """Authenticate, run ``handler(uid, data)`` and shape the response.

    Args:
        req: Firebase callable request
        name: Function name used in logs
        handler: Does the work; its result is returned with timestamps as strings
        require_auth: When False, ``uid`` may be None

    Returns:
        ``{"success": True, "data": ...}``

    Raises:
        HttpsError: For any failure; ServiceErrors keep their message
    """
    options_response = cors_response_on_call(getattr(req, "raw_request", None))
    if options_response:
        return options_response

    try:
        uid = db_auth_wrapper(req) if require_auth else optional_user_id(req)
        result = handler(uid, req.data or {})
        return {"success": True, "data": serialize_timestamps(result)}

    except https_fn.HttpsError:
        raise
    except ServiceError as e:
        logger.warning(f"{name} failed: [{e.code.value}] {e.message}")
        raise to_https_error(e) from e
    except Exception as e:
        logger.error(f"{name} failed: {e}")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INTERNAL,
            "An error occurred processing your request"
        )
