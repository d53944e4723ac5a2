"""
Tests for logging setup
"""
import logging

import pytest

from student_registry_api.app.core.logging_config import LOG_FORMAT, setup_logging


@pytest.fixture
def bare_root_logger(monkeypatch):
    root = logging.RootLogger(logging.WARNING)
    monkeypatch.setattr(logging, "root", root)
    yield root
    for handler in root.handlers:
        handler.close()


def _drop_capture_handlers(root):
    # pytest attaches its capture handlers to the root logger for the test call.
    root.handlers.clear()


def test_configures_console_handler_once(bare_root_logger):
    _drop_capture_handlers(bare_root_logger)
    setup_logging("debug")
    setup_logging("error")
    assert len(bare_root_logger.handlers) == 1
    assert bare_root_logger.level == logging.DEBUG
    assert bare_root_logger.handlers[0].formatter._fmt == LOG_FORMAT


def test_unknown_level_falls_back_to_info(bare_root_logger):
    _drop_capture_handlers(bare_root_logger)
    setup_logging("chatty")
    assert bare_root_logger.level == logging.INFO


def test_file_handler(bare_root_logger, tmp_path):
    _drop_capture_handlers(bare_root_logger)
    logfile = tmp_path / "registry.log"
    setup_logging("INFO", str(logfile))
    bare_root_logger.info("hello file")
    for handler in bare_root_logger.handlers:
        handler.flush()
    assert "hello file" in logfile.read_text(encoding="utf-8")


def test_uvicorn_loggers_propagate_to_root(bare_root_logger):
    _drop_capture_handlers(bare_root_logger)
    setup_logging()
    assert logging.getLogger("uvicorn.access").propagate is True
    assert logging.getLogger("uvicorn.access").handlers == []
