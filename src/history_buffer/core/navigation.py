"""Cursor movement over a ``HistoryState``."""

from __future__ import annotations

from typing import Any

from .state import UNSELECTED, HistoryState


class HistoryNavigator:
    """The ``History.move`` namespace.

    ``prev`` and ``next`` return whether the cursor moved. ``first``,
    ``last`` and ``past_last`` return whether the history has entries, even
    when the cursor was already there.
    """

    __slots__ = ("_state",)

    def __init__(self, state: HistoryState[Any]) -> None:
        self._state = state

    @property
    def position(self) -> int:
        return self._state.cursor

    def prev(self) -> bool:
        """Step towards older entries, stopping at the oldest."""

        if self._state.cursor <= 0:
            return False
        self._state.cursor -= 1
        return True

    def next(self) -> bool:
        """Step towards newer entries, stopping at the past-last slot."""

        if self._state.cursor == self._state.past_last:
            return False
        self._state.cursor += 1
        return True

    def first(self) -> bool:
        return self._jump(0)

    def last(self) -> bool:
        return self._jump(self._state.size - 1)

    def past_last(self) -> bool:
        return self._jump(self._state.past_last)

    def _jump(self, index: int) -> bool:
        if not self._state.entries:
            self._state.cursor = UNSELECTED
            return False
        self._state.cursor = index
        return True


__all__ = ["HistoryNavigator"]
