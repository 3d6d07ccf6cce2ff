"""User state callable function: read, activate a goal, reset, export, import."""

from firebase_functions import https_fn, options

from onegoal.services.data_service import DataService
from onegoal.services.goal_service import GoalService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, unknown_action


def _handle(uid, data):
    action = require_field(data, "action")

    if action == "get":
        return GoalService().get_user_data(uid)
    if action == "setActiveGoal":
        goal_id = data.get("goalId")
        GoalService().set_active_goal(uid, goal_id)
        return {"activeGoalId": goal_id}
    if action == "reset":
        return GoalService().reset_user_data(uid)
    if action == "export":
        return {"json": DataService().export_goals_json(uid)}
    if action == "import":
        goals = DataService().import_goals_json(uid, require_field(data, "json"))
        return {"importedGoalIds": [goal["id"] for goal in goals]}
    raise unknown_action(action)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def user_data_callable(req: https_fn.CallableRequest):
    """Whole-state operations for the signed-in user.

    Actions: ``get``, ``setActiveGoal`` (``goalId`` or null), ``reset``,
    ``export`` and ``import`` (``json`` holds the export file contents).
    """
    return run_callable(req, "user_data_callable", _handle)
