from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import pytest

from vim_input.runtime import telemetry


def test_env_helpers_read_prefixed_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VIM_INPUT_LOG_JSON", "yes")
    monkeypatch.setenv("VIM_INPUT_LOG_BUFFER_SIZE", "512")

    assert telemetry.env_flag("LOG_JSON", False) is True
    assert telemetry.env_flag("NO_COLOR", False) is False
    assert telemetry.env_int("LOG_BUFFER_SIZE", 2048) == 512
    assert telemetry.env_int("MISSING", 7) == 7


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_get_logger_is_cached() -> None:
    assert telemetry.get_logger("vim_input.test") is telemetry.get_logger(
        "vim_input.test"
    )


class RecordingLogger:
    def __init__(self) -> None:
        self.context: dict[str, str] = {}
        self.entered: list[str] = []
        self.errors: list[tuple[str, list[tuple[str, str]]]] = []

    def add_context(self, key: str, value: str) -> None:
        self.context[key] = value

    def remove_context(self, key: str) -> None:
        self.context.pop(key, None)

    @contextmanager
    def track_component(self, name: str) -> Iterator[None]:
        self.entered.append(f"component:{name}")
        yield

    @contextmanager
    def profile(self, name: str) -> Iterator[None]:
        self.entered.append(f"profile:{name}")
        yield

    def error_with(self, message: str, data: list[tuple[str, str]]) -> None:
        self.errors.append((message, data))


def test_span_reports_failure_and_clears_context(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    log = RecordingLogger()
    monkeypatch.setattr(telemetry, "get_logger", lambda name=None: log)

    with pytest.raises(RuntimeError):
        with telemetry.span(
            "operator::delete", component="operators", metadata={"start": 3}
        ):
            assert log.context == {"start": "3"}
            raise RuntimeError("boom")

    assert log.entered == ["component:operators", "profile:operator::delete"]
    assert log.context == {}
    message, data = log.errors[0]
    assert message == "span::fail"
    assert ("reason", "boom") in data
    assert ("component", "operators") in data
