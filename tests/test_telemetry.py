import pytest

from history_buffer.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=telemetry.active_config(), preset="development")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError, match="Unknown preset"):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached_until_reconfigured() -> None:
    telemetry.configure()
    first = telemetry.get_logger("history_buffer.test")

    assert telemetry.get_logger("history_buffer.test") is first

    telemetry.configure()
    assert telemetry.get_logger("history_buffer.test") is not first


def test_span_reraises_errors() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", metadata={"case": "error"}):
            raise RuntimeError("boom")


def test_span_handle_collects_metadata() -> None:
    with telemetry.span("test::span", component=True) as handle:
        handle.add_metadata("size", 3)

    assert handle.metadata["size"] == "3"
    assert handle.component_name == "test::span"
