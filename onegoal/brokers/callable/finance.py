"""Finance lists callable function."""

from firebase_functions import https_fn, options

from onegoal.services.budget_service import BudgetService
from onegoal.services.net_worth_service import NetWorthService
from onegoal.services.subscription_service import SubscriptionService
from onegoal.services.transaction_service import TransactionService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, require_object, unknown_action
from onegoal.util.timestamps import deserialize_timestamps

# list name -> (service class, entity name used in its method names)
_SERVICES = {
    "subscriptions": (SubscriptionService, "subscription"),
    "assets": (NetWorthService, "asset"),
    "liabilities": (NetWorthService, "liability"),
    "transactions": (TransactionService, "transaction"),
    "budgets": (BudgetService, "budget"),
}


def _handle(uid, data):
    list_name = require_field(data, "list")
    if list_name not in _SERVICES:
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            f"Unknown finance list: {list_name}"
        )
    action = require_field(data, "action")
    goal_id = require_field(data, "goalId")
    service_cls, entity = _SERVICES[list_name]
    service = service_cls()

    if action == "add":
        item = deserialize_timestamps(require_object(data, "item"))
        return getattr(service, f"add_{entity}")(uid, goal_id, item)
    if action == "update":
        updates = deserialize_timestamps(require_object(data, "updates", required=False))
        return getattr(service, f"update_{entity}")(uid, goal_id, require_field(data, "itemId"), updates)
    if action == "delete":
        deleted = getattr(service, f"delete_{entity}")(uid, goal_id, require_field(data, "itemId"))
        return {"deleted": deleted}
    raise unknown_action(action)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def finance_callable(req: https_fn.CallableRequest):
    """Add, update or delete subscriptions, assets, liabilities,
    transactions or budgets of a goal.

    Deleting a budget also deletes the transactions and subscriptions
    assigned to it.
    """
    return run_callable(req, "finance_callable", _handle)
