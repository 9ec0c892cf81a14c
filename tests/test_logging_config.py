"""Tests for docker_setup/logging_config.py."""

import json
import logging

import pytest

from docker_setup.logging_config import JsonFormatter, setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


def test_text_console_handler():
    setup_logging("DEBUG")
    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)


def test_json_console_handler():
    setup_logging("INFO", log_format="json")
    root = logging.getLogger()
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_unknown_level_falls_back_to_info():
    setup_logging("chatty")
    assert logging.getLogger().level == logging.INFO


def test_logs_dir_adds_rotating_file(tmp_path):
    logs_dir = tmp_path / "logs"
    setup_logging("INFO", logs_dir=str(logs_dir))
    root = logging.getLogger()

    assert len(root.handlers) == 2
    logging.getLogger("docker_setup.test").info("written to file")
    for handler in root.handlers:
        handler.flush()
    assert "written to file" in (logs_dir / "docker-setup.log").read_text()


def test_json_formatter_output():
    record = logging.LogRecord(
        "docker_setup.conf", logging.ERROR, __file__, 1,
        "Error while running %s hook", ("post init",), None,
    )
    data = json.loads(JsonFormatter().format(record))
    assert data["level"] == "ERROR"
    assert data["logger"] == "docker_setup.conf"
    assert data["message"] == "Error while running post init hook"
    assert "timestamp" in data
