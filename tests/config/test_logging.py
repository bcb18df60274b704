"""Tests for structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator

import pytest
import structlog

from datapop.config.logging import bind_document, configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after each test."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    datapop = logging.getLogger("datapop")
    datapop_level = datapop.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    datapop.setLevel(datapop_level)
    structlog.contextvars.clear_contextvars()


class TestConfigureLogging:
    def test_verbose_enables_debug(self) -> None:
        configure_logging(verbose=True, log_json=False)
        assert logging.getLogger("datapop").level == logging.DEBUG
        assert logging.getLogger().level == logging.WARNING

    def test_non_verbose_sets_warning(self) -> None:
        configure_logging(verbose=False, log_json=False)
        assert logging.getLogger("datapop").level == logging.WARNING

    def test_json_mode_output(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        structlog.get_logger("datapop.test").warning("json test", answer=42)
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "json test"
        assert parsed["answer"] == 42
        assert parsed["level"] == "warning"

    def test_stdlib_logs_are_rendered(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        logging.getLogger("datapop.domain.grid").debug("grid %s", "built")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["event"] == "grid built"
        assert parsed["logger"] == "datapop.domain.grid"

    def test_bound_document_appears(self, capfd: pytest.CaptureFixture[str]) -> None:
        configure_logging(verbose=True, log_json=True)
        bind_document(document_id="DOC-1", document_path="/tmp/doc.json")
        structlog.get_logger("datapop.test").info("loaded")
        parsed = json.loads(capfd.readouterr().err.strip())
        assert parsed["document_id"] == "DOC-1"
        assert parsed["document_path"] == "/tmp/doc.json"
