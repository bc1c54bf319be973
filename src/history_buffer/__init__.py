"""Bounded command-line style history with cursor navigation."""

from .core import (
    UNSET,
    History,
    HistoryNavigator,
    HistoryOptions,
    InvalidConfigurationError,
    create_history,
)

__all__ = [
    "History",
    "HistoryNavigator",
    "HistoryOptions",
    "InvalidConfigurationError",
    "UNSET",
    "create_history",
]

__version__ = "0.1.0"
