"""Health check HTTP endpoint."""

from firebase_functions import https_fn, options

from onegoal.apis.Db import Db
from onegoal.config import get_environment, get_users_collection
from onegoal.util.cors_response import preflight_response, create_cors_response
from onegoal.util.logger import get_logger
from onegoal.util.timestamps import now, to_iso8601_z

logger = get_logger(__name__)


@https_fn.on_request(
    ingress=options.IngressSetting.ALLOW_ALL,
    timeout_sec=30,
)
def health_check(req: https_fn.Request):
    """Report whether the user state collection is reachable.

    Returns:
        200 when healthy, 503 when the database check fails
    """
    preflight = preflight_response(req, ["GET", "OPTIONS"])
    if preflight is not None:
        return preflight

    try:
        db_status = "healthy"
        try:
            db = Db.get_instance()
            db.collections["users"].limit(1).get()
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            db_status = "unhealthy"

        response_data = {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "timestamp": to_iso8601_z(now()),
            "environment": get_environment(),
            "services": {
                "database": db_status,
                "usersCollection": get_users_collection(),
            },
        }
        logger.info(f"Health check: {response_data['status']}")
        return create_cors_response(response_data, 200 if db_status == "healthy" else 503)

    except Exception as e:
        logger.error(f"Health check failed: {e}")
        return create_cors_response({"status": "unhealthy", "error": str(e)}, status=503)
