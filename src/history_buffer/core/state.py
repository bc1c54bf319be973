"""Entries + cursor record shared by the history and its navigator."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, List, TypeVar

T = TypeVar("T")

UNSELECTED = -1


@dataclass(slots=True)
class HistoryState(Generic[T]):
    """Mutable history contents.

    ``cursor`` stays within ``[-1, len(entries)]``. Only indexes inside
    ``[0, len(entries))`` select an entry; ``-1`` marks an empty history and
    ``len(entries)`` is the past-last slot used after every insertion.
    """

    entries: List[T] = field(default_factory=list)
    cursor: int = UNSELECTED

    @property
    def size(self) -> int:
        return len(self.entries)

    @property
    def past_last(self) -> int:
        return len(self.entries)

    def selected(self) -> bool:
        return 0 <= self.cursor < len(self.entries)

    def reset_cursor(self) -> None:
        self.cursor = self.past_last


__all__ = ["HistoryState", "UNSELECTED"]
