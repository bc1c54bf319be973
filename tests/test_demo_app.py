from history_buffer.adapters.textual.app import (
    DEFAULT_MAX_SIZE,
    HistoryInputApp,
    _parse_args,
    build_history,
)


def test_build_history_applies_min_length() -> None:
    history = build_history(max_size=4, default="", min_length=2)

    history.add("x")
    history.add("ls")

    assert history.snapshot() == ("ls",)
    assert history.max_size == 4
    assert history.current() == ""


def test_parse_args_defaults(monkeypatch) -> None:
    monkeypatch.delenv("HISTORY_BUFFER_MAX_SIZE", raising=False)

    args = _parse_args([])

    assert args.max_size == DEFAULT_MAX_SIZE
    assert args.default == ""
    assert args.log_preset == "production"


def test_parse_args_reads_max_size_from_env(monkeypatch) -> None:
    monkeypatch.setenv("HISTORY_BUFFER_MAX_SIZE", "25")

    assert _parse_args([]).max_size == 25


def test_app_keeps_supplied_empty_history() -> None:
    history = build_history(max_size=2)

    app = HistoryInputApp(history)

    assert app.history is history
