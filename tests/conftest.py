"""Shared pytest fixtures."""

from __future__ import annotations

import os
import stat

# Force settings to use test-safe defaults before any import
os.environ.setdefault("NXVSH_BINARY", "/nonexistent/vsh")
os.environ.setdefault("NXVSH_CONFIG_STATUS_STRATEGY", "shell")
os.environ.setdefault("NXVSH_NEIGHBOR_SOURCE", "lldp-detail")
os.environ.setdefault("NXVSH_LOG_JSON", "false")

import pytest

from nxvsh.config import Settings
from tests.mock_vsh import MockVshExecutor


@pytest.fixture
def mock_vsh():
    """Provide a fresh MockVshExecutor."""
    return MockVshExecutor()


@pytest.fixture
def fake_vsh(tmp_path):
    """Write an executable shell script standing in for the VSH binary.

    Returns a factory taking the script body and returning Settings that
    point at it.
    """

    def _make(body: str, name: str = "vsh") -> Settings:
        script = tmp_path / name
        script.write_text(f"#!/bin/sh\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return Settings(nxvsh_binary=str(script))

    return _make
