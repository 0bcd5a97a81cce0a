"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest

from vaultpush.config.logging import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    app = logging.getLogger("vaultpush")
    app_level = app.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    app.setLevel(app_level)


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("vaultpush").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("vaultpush").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("vaultpush.test").warning("json test %d", 42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test 42"
        assert parsed["level"] == "warning"
        assert parsed["logger"] == "vaultpush.test"
        assert "timestamp" in parsed

    def test_console_mode_is_not_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=False)
        logging.getLogger("vaultpush.test").info("plain line")
        err = capfd.readouterr().err
        assert "plain line" in err
        assert not err.lstrip().startswith("{")

    def test_stdlib_logger_gets_structured_fields(
        self, capfd: pytest.CaptureFixture[str]
    ) -> None:
        configure_logging(verbose=True, log_json=True)

        logging.getLogger("vaultpush.services.push").debug("Pushing %s", "blog")

        captured = capfd.readouterr()
        parsed = json.loads(captured.err.strip())
        assert parsed["event"] == "Pushing blog"
        assert parsed["level"] == "debug"
        assert parsed["logger"] == "vaultpush.services.push"

    def test_exception_is_rendered_in_json(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        try:
            raise PermissionError("denied")
        except PermissionError:
            logging.getLogger("vaultpush.services.push").error("Error copying", exc_info=True)

        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "Error copying"
        assert "PermissionError" in parsed["exception"]

    def test_quiet_by_default(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(log_json=True)
        logging.getLogger("vaultpush.infrastructure.copier").debug("noise")
        assert capfd.readouterr().err == ""

    def test_idempotent_calls(self) -> None:
        """Multiple configure_logging calls don't stack handlers."""
        configure_logging(verbose=True, log_json=False)
        configure_logging(verbose=True, log_json=True)
        root = logging.getLogger()
        assert len(root.handlers) == 1
