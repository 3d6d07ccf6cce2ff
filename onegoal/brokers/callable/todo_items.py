"""To-do list callable function."""

from firebase_functions import https_fn, options

from onegoal.services.todo_service import TodoService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, require_object, unknown_action
from onegoal.util.timestamps import deserialize_timestamps


def _handle(uid, data):
    service = TodoService()
    action = require_field(data, "action")
    goal_id = require_field(data, "goalId")

    if action == "add":
        return service.add_todo_item(uid, goal_id, require_field(data, "text"))
    if action == "update":
        updates = deserialize_timestamps(require_object(data, "updates", required=False))
        return service.update_todo_item(uid, goal_id, require_field(data, "itemId"), updates)
    if action == "delete":
        return {"deleted": service.delete_todo_item(uid, goal_id, require_field(data, "itemId"))}
    if action == "reorder":
        items = require_field(data, "items")
        if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
            raise https_fn.HttpsError(
                https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
                "items must be a list of objects"
            )
        items = deserialize_timestamps(items)
        return service.update_todo_list_order(uid, goal_id, items)
    raise unknown_action(action)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def todo_callable(req: https_fn.CallableRequest):
    """Add, update, delete or reorder to-do items.

    Request data: ``action``, ``goalId`` and, per action, ``text``,
    ``itemId``, ``updates`` or ``items``.
    """
    return run_callable(req, "todo_callable", _handle)
