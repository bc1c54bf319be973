from __future__ import annotations

from typing import List

from history_buffer import History, create_history
from history_buffer.adapters.textual import TextualHistoryAdapter, TextualHistoryHooks


def make_adapter(
    history: History[str] | None = None,
) -> tuple[TextualHistoryAdapter, List[str], List[str], List[str]]:
    values: List[str] = []
    statuses: List[str] = []
    logs: List[str] = []
    hooks = TextualHistoryHooks(
        update_value=lambda value: values.append(value),
        update_status=lambda status: statuses.append(status),
        log=lambda line: logs.append(line),
    )
    if history is None:
        history = create_history({"max_size": 10, "default_value": ""})
    return TextualHistoryAdapter(history, hooks), values, statuses, logs


def test_enter_stores_value_and_clears_field() -> None:
    adapter, values, statuses, _ = make_adapter()

    result = adapter.handle_textual_key("enter", value="ls -la")

    assert result.consumed
    assert result.moved
    assert values == [""]
    assert adapter.history.snapshot() == ("ls -la",)
    assert statuses[-1] == "new (1 stored)"


def test_up_and_down_recall_entries() -> None:
    adapter, values, statuses, _ = make_adapter()
    for command in ("make", "make test", "git status"):
        adapter.handle_textual_key("enter", value=command)
    values.clear()

    adapter.handle_textual_key("up")
    adapter.handle_textual_key("up")
    adapter.handle_textual_key("down")
    adapter.handle_textual_key("down")

    assert values == ["git status", "make test", "git status", ""]
    assert statuses[-3] == "2/3"


def test_up_clamps_at_oldest_entry() -> None:
    adapter, values, _, _ = make_adapter()
    adapter.handle_textual_key("enter", value="only")

    first = adapter.handle_textual_key("up")
    second = adapter.handle_textual_key("UP")

    assert first.moved is True
    assert second.moved is False
    assert second.value == "only"


def test_escape_returns_to_fresh_line() -> None:
    adapter, values, _, _ = make_adapter()
    adapter.handle_textual_key("enter", value="one")
    adapter.handle_textual_key("enter", value="two")
    adapter.handle_textual_key("up")

    result = adapter.handle_textual_key("escape")

    assert result.consumed
    assert values[-1] == ""
    assert adapter.status_text() == "new (2 stored)"


def test_rejected_submit_reports_no_change() -> None:
    history = create_history(
        {"max_size": 5, "default_value": "", "validate": lambda entry: bool(entry)}
    )
    adapter, values, _, _ = make_adapter(history)

    result = adapter.handle_textual_key("enter", value="")

    assert result.consumed
    assert result.moved is False
    assert history.length() == 0
    assert values == [""]


def test_none_default_renders_as_empty_text() -> None:
    adapter, values, _, _ = make_adapter(create_history({"max_size": 3}))

    adapter.handle_textual_key("escape")

    assert values == [""]


def test_other_keys_are_not_consumed() -> None:
    adapter, values, _, logs = make_adapter()

    result = adapter.handle_textual_key("a", value="a")

    assert result.consumed is False
    assert values == []
    assert logs == []


def test_adapter_emits_log_lines() -> None:
    adapter, _, _, logs = make_adapter()

    adapter.handle_textual_key("enter", value="pwd")

    assert any(line.startswith("key ->") for line in logs)
    assert any(line.startswith("result <-") for line in logs)
