"""Starred quotes callable function."""

from firebase_functions import https_fn, options

from onegoal.services.quote_service import QuoteService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, unknown_action


def _handle(uid, data):
    action = require_field(data, "action")
    goal_id = require_field(data, "goalId")
    quote_id = require_field(data, "quoteId")

    if action == "star":
        QuoteService().add_starred_quote(uid, goal_id, quote_id)
    elif action == "unstar":
        QuoteService().remove_starred_quote(uid, goal_id, quote_id)
    else:
        raise unknown_action(action)
    return {"quoteId": quote_id, "starred": action == "star"}


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def quote_callable(req: https_fn.CallableRequest):
    """Star or unstar a quote on a goal."""
    return run_callable(req, "quote_callable", _handle)
