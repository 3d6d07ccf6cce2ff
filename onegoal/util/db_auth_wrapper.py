"""Identity of the caller of a callable function."""

from typing import Optional

from firebase_functions import https_fn

from onegoal.apis.Db import Db
from onegoal.config import is_emulator
from onegoal.util.logger import get_logger

logger = get_logger(__name__)

DEV_USER_HEADER = "User-Id"


def _dev_user_id(req: https_fn.CallableRequest) -> Optional[str]:
    # Tests and local clients identify themselves with a header
    raw_request = getattr(req, "raw_request", None)
    if raw_request is not None and raw_request.headers:
        return raw_request.headers.get(DEV_USER_HEADER)
    return None


def optional_user_id(req: https_fn.CallableRequest) -> Optional[str]:
    """Current user id, or None when nobody is signed in."""
    if Db.is_development() or is_emulator():
        user_id = _dev_user_id(req)
        if user_id:
            return user_id
    if req.auth:
        return req.auth.uid
    return None


def db_auth_wrapper(req: https_fn.CallableRequest) -> str:
    """Authenticate a callable request.

    Args:
        req: Firebase callable request object

    Returns:
        Authenticated user ID

    Raises:
        HttpsError: UNAUTHENTICATED if there is no user
    """
    user_id = optional_user_id(req)
    if not user_id:
        logger.warning("Unauthenticated request")
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.UNAUTHENTICATED,
            "The function must be called while authenticated."
        )
    return user_id
