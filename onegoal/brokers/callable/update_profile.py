"""Profile update callable function."""

from firebase_functions import https_fn, options

from onegoal.services.auth_service import AuthService
from onegoal.util.callable_runner import run_callable


def _handle(uid, data):
    AuthService().update_user_profile(uid, data.get("displayName"), data.get("photoURL"))
    return {"uid": uid}


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def update_profile_callable(req: https_fn.CallableRequest):
    """Update display name and/or photo URL of the caller."""
    # The service reports a missing identity itself
    return run_callable(req, "update_profile_callable", _handle, require_auth=False)
