"""Tests for structlog setup."""

from __future__ import annotations

import json

import pytest
import structlog

from nxvsh.config import Settings
from nxvsh.utils.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_output(capsys):
    setup_logging(Settings(nxvsh_log_json=True, nxvsh_log_level="DEBUG"))
    get_logger("nxvsh.test").info("vsh.exec", command="show version", rc=0)

    line = capsys.readouterr().err.strip().splitlines()[-1]
    record = json.loads(line)
    assert record["event"] == "vsh.exec"
    assert record["command"] == "show version"
    assert record["level"] == "info"
    assert "timestamp" in record


def test_level_filtering(capsys):
    setup_logging(Settings(nxvsh_log_json=True, nxvsh_log_level="WARNING"))
    log = get_logger("nxvsh.test")
    log.info("config.saved")
    log.warning("config.save_failed", rc=1)

    err = capsys.readouterr().err
    assert "config.saved" not in err
    assert "config.save_failed" in err


def test_unknown_level_falls_back_to_info(capsys):
    setup_logging(Settings(nxvsh_log_json=False, nxvsh_log_level="chatty"))
    log = get_logger("nxvsh.test")
    log.debug("hidden")
    log.info("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
