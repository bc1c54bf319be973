"""Executable Textual app: an input line with shell-style history recall."""

from __future__ import annotations

import argparse
import os
from typing import Optional, Sequence

try:  # pragma: no cover - imported only when demo is run
    from textual import events
    from textual.app import App, ComposeResult
    from textual.containers import Vertical
    from textual.widgets import Footer, Header, Input, Static
except ModuleNotFoundError as exc:  # pragma: no cover - friendly error for missing dep
    raise RuntimeError(
        "Install the 'textual' package to use history_buffer.adapters.textual.app"
    ) from exc

from history_buffer.core import History, HistoryOptions
from history_buffer.runtime import telemetry

from .controller import TextualHistoryAdapter, TextualHistoryHooks

DEFAULT_MAX_SIZE = 10


def min_length_validator(min_length: int):
    def validate(entry: str) -> bool:
        return len(entry) >= min_length

    return validate


def build_history(
    *, max_size: int = DEFAULT_MAX_SIZE, default: str = "", min_length: int = 0
) -> History[str]:
    options: HistoryOptions[str] = HistoryOptions(
        max_size=max_size,
        default_value=default,
        validate=min_length_validator(min_length) if min_length > 0 else None,
    )
    return History(options, name="demo")


class HistoryInputApp(App[None]):
    """Single input line; up/down recall, escape resets, enter stores."""

    CSS = """
	Screen {
		layout: vertical;
	}

	#entries-view {
		height: 1fr;
		border: round $accent;
		padding: 0 1;
		overflow: auto;
	}

	#status-line {
		height: 1;
		background: $surface-darken-1;
		padding: 0 1;
	}
	"""

    BINDINGS = [
        ("ctrl+c", "quit", "Quit"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, history: Optional[History[str]] = None) -> None:
        super().__init__()
        self.history = history if history is not None else build_history()
        self.adapter: TextualHistoryAdapter | None = None
        self._input: Input | None = None
        self._entries_widget: Static | None = None
        self._status_widget: Static | None = None

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        with Vertical(id="entries-area"):
            self._entries_widget = Static("", id="entries-view")
            yield self._entries_widget
        self._status_widget = Static("", id="status-line")
        yield self._status_widget
        self._input = Input(placeholder="type a command", id="command-input")
        yield self._input
        yield Footer()

    def on_mount(self) -> None:
        hooks = TextualHistoryHooks(
            update_value=self._update_value,
            update_status=self._update_status,
            log=self._log_line,
        )
        self.adapter = TextualHistoryAdapter(self.history, hooks)
        self._render_entries()
        if self._input:
            self._input.focus()

    def on_key(self, event: events.Key) -> None:
        if not self.adapter or event.key not in {"up", "down", "escape"}:
            return
        self.adapter.handle_textual_key(event.key)
        event.stop()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if not self.adapter:
            return
        self.adapter.handle_textual_key("enter", value=event.value)
        self._render_entries()

    def _update_value(self, value: str) -> None:
        if self._input:
            self._input.value = value
            self._input.cursor_position = len(value)

    def _update_status(self, status: str) -> None:
        if self._status_widget:
            self._status_widget.update(status)

    def _render_entries(self) -> None:
        if not self._entries_widget:
            return
        lines = [
            f"{index + 1:>3}  {entry}"
            for index, entry in enumerate(self.history.snapshot())
        ]
        self._entries_widget.update("\n".join(lines))

    def _log_line(self, line: str) -> None:
        telemetry.record_event("demo.key", level="debug", data={"line": line})


def _env_int(key: str, fallback: int) -> int:
    value = os.environ.get(key)
    if value is None:
        return fallback
    try:
        return int(value)
    except ValueError:
        return fallback


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the history buffer demo.")
    parser.add_argument(
        "--max-size",
        type=int,
        default=_env_int("HISTORY_BUFFER_MAX_SIZE", DEFAULT_MAX_SIZE),
        help=f"Entries to keep (default: {DEFAULT_MAX_SIZE})",
    )
    parser.add_argument(
        "--default",
        default="",
        help="Text shown when no entry is selected (default: empty)",
    )
    parser.add_argument(
        "--min-length",
        type=int,
        default=0,
        help="Reject entries shorter than this many characters",
    )
    parser.add_argument(
        "--log-preset",
        choices=telemetry.PRESETS,
        default="production",
        help="Telemetry preset (default: production, logs to a file)",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    telemetry.configure(preset=args.log_preset)
    history = build_history(
        max_size=args.max_size, default=args.default, min_length=args.min_length
    )
    HistoryInputApp(history).run()


if __name__ == "__main__":  # pragma: no cover - manual demo
    main()
