"""Daily progress and stopwatch session callable function."""

from firebase_functions import https_fn, options

from onegoal.services.daily_progress_service import DailyProgressService
from onegoal.services.stopwatch_service import StopwatchService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, require_object, unknown_action
from onegoal.util.timestamps import deserialize_timestamps


def _handle(uid, data):
    action = require_field(data, "action")
    goal_id = require_field(data, "goalId")

    if action == "save":
        progress = deserialize_timestamps(require_object(data, "progress"))
        return DailyProgressService().save_daily_progress(uid, goal_id, progress)

    stopwatch = StopwatchService()
    if action == "addSession":
        session = deserialize_timestamps(require_object(data, "session"))
        return stopwatch.add_stopwatch_session(uid, goal_id, session)
    if action == "updateSession":
        return stopwatch.update_stopwatch_session(
            uid, goal_id,
            require_field(data, "date"),
            require_field(data, "sessionId"),
            require_field(data, "label"),
        )
    if action == "deleteSession":
        deleted = stopwatch.delete_stopwatch_session(
            uid, goal_id, require_field(data, "date"), require_field(data, "sessionId")
        )
        return {"deleted": deleted}
    raise unknown_action(action)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def daily_progress_callable(req: https_fn.CallableRequest):
    """Save a day's progress, or add, relabel or delete stopwatch sessions.

    Request data: ``action`` (save, addSession, updateSession, deleteSession),
    ``goalId`` and, per action, ``progress``, ``session``, ``date``,
    ``sessionId`` or ``label``.
    """
    return run_callable(req, "daily_progress_callable", _handle)
