"""Callable function for the unordered goal lists."""

from firebase_functions import https_fn, options

from onegoal.documents.lists import (
    GoalListMutator,
    DISTRACTION_ITEMS,
    STICKY_NOTES,
    RESOURCES,
    TIME_BLOCKS,
)
from onegoal.services.distraction_service import DistractionService
from onegoal.services.resource_service import ResourceService
from onegoal.services.sticky_note_service import StickyNoteService
from onegoal.services.time_block_service import TimeBlockService
from onegoal.util.callable_runner import run_callable
from onegoal.util.https_errors import require_field, require_object, unknown_action
from onegoal.util.timestamps import deserialize_timestamps


def _add(list_name, uid, goal_id, data):
    if list_name == "distractions":
        return DistractionService().add_distraction_item(uid, goal_id, require_field(data, "title"))
    if list_name == "stickyNotes":
        return StickyNoteService().add_sticky_note(
            uid, goal_id,
            require_field(data, "title"),
            data.get("content") or "",
            data.get("color") or "yellow",
        )
    if list_name == "resources":
        return ResourceService().add_resource(
            uid, goal_id,
            require_field(data, "url"),
            require_field(data, "title"),
            data.get("description"),
            data.get("type") or "other",
        )
    return TimeBlockService().add_time_block(
        uid, goal_id,
        require_field(data, "label"),
        require_field(data, "startTime"),
        require_field(data, "endTime"),
        require_field(data, "color"),
    )


_KINDS = {
    "distractions": DISTRACTION_ITEMS,
    "stickyNotes": STICKY_NOTES,
    "resources": RESOURCES,
    "timeBlocks": TIME_BLOCKS,
}


def _handle(uid, data):
    list_name = require_field(data, "list")
    if list_name not in _KINDS:
        raise https_fn.HttpsError(
            https_fn.FunctionsErrorCode.INVALID_ARGUMENT,
            f"Unknown list: {list_name}"
        )
    action = require_field(data, "action")
    goal_id = require_field(data, "goalId")

    if action == "add":
        return _add(list_name, uid, goal_id, data)
    mutator = GoalListMutator(_KINDS[list_name])
    if action == "update":
        updates = deserialize_timestamps(require_object(data, "updates", required=False))
        return mutator.update(uid, goal_id, require_field(data, "itemId"), updates)
    if action == "delete":
        return {"deleted": mutator.delete(uid, goal_id, require_field(data, "itemId"))}
    raise unknown_action(action)


@https_fn.on_call(
    cors=options.CorsOptions(cors_origins=["*"]),
    ingress=options.IngressSetting.ALLOW_ALL,
)
def goal_list_callable(req: https_fn.CallableRequest):
    """Add, update or delete items of a goal's distractions, sticky notes,
    resources or time blocks.

    Request data: ``list``, ``action``, ``goalId`` plus the action's fields.
    """
    return run_callable(req, "goal_list_callable", _handle)
