"""Maps input-field keys onto history operations for Textual hosts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from history_buffer.core import History


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualHistoryHooks:
    """Callbacks the adapter uses to update the host widgets."""

    update_value: Callable[[str], None]
    update_status: Callable[[str], None] = _noop
    log: Callable[[str], None] = _noop


@dataclass(slots=True)
class HistoryKeyResult:
    """Outcome of ``TextualHistoryAdapter.handle_textual_key``."""

    consumed: bool
    moved: bool = False
    value: Optional[str] = None


class TextualHistoryAdapter:
    """Drives a ``History`` from an input field's key events.

    Up/down browse older/newer entries, escape returns to the fresh
    (past-last) slot and enter stores the field's text. After each handled
    key the field is repopulated with ``history.current()``.
    """

    def __init__(self, history: History[str], hooks: TextualHistoryHooks) -> None:
        self.history = history
        self.hooks = hooks
        self._handlers: Dict[str, Callable[[Optional[str]], bool]] = {
            "up": lambda _value: self.history.move.prev(),
            "down": lambda _value: self.history.move.next(),
            "escape": lambda _value: self.history.move.past_last(),
            "enter": self._submit,
        }
        self._refresh_status()

    def handle_textual_key(
        self, key: str, *, value: Optional[str] = None
    ) -> HistoryKeyResult:
        normalized = key.lower()
        handler = self._handlers.get(normalized)
        if handler is None:
            return HistoryKeyResult(consumed=False)

        self._log_state("key ->", key=normalized, value=value)
        moved = handler(value)
        text = self._render(self.history.current())
        self.hooks.update_value(text)
        self._refresh_status()
        self._log_state("result <-", moved=moved, value=text)
        return HistoryKeyResult(consumed=True, moved=moved, value=text)

    def status_text(self) -> str:
        position = self.history.move.position
        size = self.history.length()
        if 0 <= position < size:
            return f"{position + 1}/{size}"
        return f"new ({size} stored)"

    def _submit(self, value: Optional[str]) -> bool:
        before = self.history.snapshot()
        self.history.add(value if value is not None else "")
        return self.history.snapshot() != before

    def _refresh_status(self) -> None:
        self.hooks.update_status(self.status_text())

    @staticmethod
    def _render(value: Any) -> str:
        return "" if value is None else str(value)

    def _log_state(self, prefix: str, **fields: object) -> None:
        parts = [prefix, f"history={self.history.name!r}"]
        parts.append(f"cursor={self.history.move.position}")
        parts.extend(f"{key}={val!r}" for key, val in fields.items() if val is not None)
        self.hooks.log(" ".join(parts))


__all__ = ["HistoryKeyResult", "TextualHistoryAdapter", "TextualHistoryHooks"]
