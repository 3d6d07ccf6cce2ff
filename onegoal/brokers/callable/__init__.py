"""Callable brokers package."""

from .todo_items import todo_callable
from .goal_lists import goal_list_callable
from .finance import finance_callable
from .quotes import quote_callable
from .user_data import user_data_callable
from .update_profile import update_profile_callable
from .daily_progress import daily_progress_callable

__all__ = [
    "todo_callable",
    "goal_list_callable",
    "finance_callable",
    "quote_callable",
    "user_data_callable",
    "update_profile_callable",
    "daily_progress_callable",
]
