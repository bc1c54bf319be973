"""History buffer, its options and cursor navigation."""

from .history import History, create_history
from .navigation import HistoryNavigator
from .options import UNSET, HistoryOptions, InvalidConfigurationError, accept_all
from .state import UNSELECTED, HistoryState

__all__ = [
    "History",
    "HistoryNavigator",
    "HistoryOptions",
    "HistoryState",
    "InvalidConfigurationError",
    "UNSELECTED",
    "UNSET",
    "accept_all",
    "create_history",
]
