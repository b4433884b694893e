"""Unit tests for femtologging integration helpers.

Run with:
    pytest tests/unit/test_logging.py
"""

from __future__ import annotations

import pytest

from buildtrigger.logging import (
    configure_logging,
    format_log_message,
    log_debug,
    log_exception,
    log_info,
    log_warning,
    normalize_log_level,
)


class _FakeLogger:
    """Collects log calls for assertions."""

    def __init__(self) -> None:
        self.calls: list[tuple[str, str, object | None, bool]] = []

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str:
        self.calls.append((level, message, exc_info, stack_info))
        return message


@pytest.mark.parametrize(
    ("input_level", "expected_level", "expected_invalid"),
    [
        ("warning", "WARNING", False),
        (" debug ", "DEBUG", False),
        (None, "INFO", True),
        ("", "INFO", True),
        ("verbose", "INFO", True),
    ],
)
def test_normalize_log_level(
    input_level: str | None, expected_level: str, expected_invalid: bool  # noqa: FBT001
) -> None:
    """Normalize log levels and flag invalid inputs."""
    assert normalize_log_level(input_level) == (expected_level, expected_invalid)


def test_format_log_message_uses_percent_formatting() -> None:
    """Percent formatting produces the expected message."""
    assert format_log_message("Branch name: %s", "main") == "Branch name: main"


@pytest.mark.parametrize(
    ("log_func", "level"),
    [(log_debug, "DEBUG"), (log_info, "INFO"), (log_warning, "WARNING")],
)
def test_level_helpers_format_messages(log_func: object, level: str) -> None:
    """Each helper formats its template and emits its level."""
    logger = _FakeLogger()

    log_func(logger, "sha=%s", "abc")  # type: ignore[operator]

    assert logger.calls == [(level, "sha=abc", None, False)]


def test_log_exception_passes_exc_info() -> None:
    """log_exception forwards the exception payload to the logger."""
    logger = _FakeLogger()
    exc = ValueError("boom")

    log_exception(logger, "failed: 100%", exc)

    assert logger.calls == [("ERROR", "failed: 100%", exc, False)]


@pytest.mark.parametrize(
    ("input_level", "debug", "expected_level", "expected_invalid"),
    [
        ("WARNING", False, "WARNING", False),
        ("nope", False, "INFO", True),
        ("ERROR", True, "DEBUG", False),
    ],
)
def test_configure_logging(
    monkeypatch: pytest.MonkeyPatch,
    input_level: str,
    debug: bool,  # noqa: FBT001
    expected_level: str,
    expected_invalid: bool,
) -> None:
    """configure_logging normalizes levels and honours runner debug mode."""
    captured: dict[str, object] = {}

    def fake_basic_config(**kwargs: object) -> None:
        captured.update(kwargs)

    monkeypatch.setattr("buildtrigger.logging.basicConfig", fake_basic_config)

    assert configure_logging(input_level, debug=debug) == (
        expected_level,
        expected_invalid,
    )
    assert captured == {"level": expected_level, "force": False}
