import json
import logging
import sys

import pytest
import structlog

from admin_console.core.logging import configure_logging


@pytest.mark.unit
def test_json_logs_go_to_stderr(capsys):
    configure_logging(log_level="INFO", json_logs=True)

    structlog.get_logger("test").info("password_reset", username="adm***")

    captured = capsys.readouterr()
    assert captured.out == ""
    entry = json.loads(captured.err.strip().splitlines()[-1])
    assert entry["event"] == "password_reset"
    assert entry["username"] == "adm***"
    assert entry["level"] == "info"
    assert "timestamp" in entry


@pytest.mark.unit
def test_level_filtering(capsys):
    configure_logging(log_level="WARNING", json_logs=True)

    logger = structlog.get_logger("test")
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err


@pytest.mark.unit
def test_unknown_level_falls_back_to_info():
    configure_logging(log_level="chatty")

    assert logging.getLogger().level == logging.INFO


@pytest.mark.unit
def test_single_stderr_handler():
    configure_logging()
    configure_logging()

    handlers = logging.getLogger().handlers
    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
