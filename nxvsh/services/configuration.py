"""Startup-configuration status and save.

Two interchangeable backends answer "is a startup configuration saved,
and when did it last change":

* ``shell``: asks VSH and parses the ``!Time:`` comment of the saved
  configuration.
* ``filesystem``: stats the configuration archive on disk.

The backend is chosen by ``NXVSH_CONFIG_STATUS_STRATEGY`` through
:func:`get_configuration_provider`.
"""

from __future__ import annotations

import errno
import os
from abc import ABC, abstractmethod
from datetime import datetime, timezone

from nxvsh.config import Settings, settings
from nxvsh.errors import MetadataError
from nxvsh.models.configuration import ConfigurationStatus
from nxvsh.services.vsh import VshExecutor, vsh
from nxvsh.utils.logging import get_logger
from nxvsh.utils.nxos_parser import extract_date_from_time_line, has_startup_config

log = get_logger(__name__)

SHOW_STARTUP_CONFIG = "show startup-config"
SHOW_STARTUP_CONFIG_TIME = "show startup-config | begin '!Time:' | head -n 1"
COPY_RUNNING_TO_STARTUP = "copy running-config startup-config"


class ConfigurationStatusProvider(ABC):
    """Common contract of the configuration status backends."""

    @abstractmethod
    def has_startup_configuration(self) -> bool:
        ...

    @abstractmethod
    def last_modified(self) -> datetime:
        ...

    def status(self) -> ConfigurationStatus:
        if not self.has_startup_configuration():
            return ConfigurationStatus(present=False)
        return ConfigurationStatus(present=True, last_modified=self.last_modified())


# ── shell backend ─────────────────────────────────────────────────────────

class ShellConfigurationStatus(ConfigurationStatusProvider):
    """Reads the saved configuration through VSH show commands."""

    def __init__(self, executor: VshExecutor | None = None) -> None:
        self._vsh = executor or vsh

    def has_startup_configuration(self) -> bool:
        result = self._vsh.run(SHOW_STARTUP_CONFIG)
        # the sentinel decides presence whatever the exit status
        if not has_startup_config(result.stdout):
            return False
        result.raise_for_status()
        return True

    def last_modified(self) -> datetime:
        result = self._vsh.run(SHOW_STARTUP_CONFIG_TIME)
        result.raise_for_status()
        return extract_date_from_time_line(result.stdout)


# ── filesystem backend ────────────────────────────────────────────────────

class FilesystemConfigurationStatus(ConfigurationStatusProvider):
    """Reads modification metadata of the saved configuration archive.

    A missing archive means no startup configuration. Any other I/O error
    is raised as :class:`MetadataError`.
    """

    def __init__(self, path: str | None = None, cfg: Settings | None = None) -> None:
        self._path = path or (cfg or settings).nxvsh_config_archive_path

    @property
    def path(self) -> str:
        return self._path

    def _stat(self) -> os.stat_result | None:
        try:
            return os.stat(self._path)
        except FileNotFoundError:
            return None
        except OSError as exc:
            log.error("config.stat_failed", path=self._path, error=str(exc))
            raise MetadataError(self._path, str(exc)) from exc

    def has_startup_configuration(self) -> bool:
        return self._stat() is not None

    def last_modified(self) -> datetime:
        st = self._stat()
        if st is None:
            raise MetadataError(self._path, os.strerror(errno.ENOENT))
        return datetime.fromtimestamp(st.st_mtime, tz=timezone.utc)

    def status(self) -> ConfigurationStatus:
        # single stat() so presence and timestamp describe the same file
        st = self._stat()
        if st is None:
            return ConfigurationStatus(present=False)
        return ConfigurationStatus(
            present=True,
            last_modified=datetime.fromtimestamp(st.st_mtime, tz=timezone.utc),
        )


# ── public API ────────────────────────────────────────────────────────────

def get_configuration_provider(
    cfg: Settings | None = None,
    *,
    executor: VshExecutor | None = None,
) -> ConfigurationStatusProvider:
    """Build the backend selected by ``nxvsh_config_status_strategy``."""
    _cfg = cfg or settings
    strategy = _cfg.nxvsh_config_status_strategy
    if strategy == "filesystem":
        return FilesystemConfigurationStatus(cfg=_cfg)
    if strategy == "shell":
        return ShellConfigurationStatus(executor or VshExecutor(_cfg))
    raise ValueError(f"unknown configuration status strategy: {strategy!r}")


def has_startup_configuration(provider: ConfigurationStatusProvider | None = None) -> bool:
    return (provider or get_configuration_provider()).has_startup_configuration()


def get_startup_configuration_date(
    provider: ConfigurationStatusProvider | None = None,
) -> datetime:
    """Return when the startup configuration last changed (UTC)."""
    return (provider or get_configuration_provider()).last_modified()


def save_configuration(executor: VshExecutor | None = None) -> bool:
    """Copy the running configuration into the startup configuration.

    Success is the exit status of the copy; the output is not inspected.
    """
    _vsh = executor or vsh
    result = _vsh.run(COPY_RUNNING_TO_STARTUP)
    if result.failed:
        log.warning("config.save_failed", rc=result.returncode, stderr=result.stderr.strip())
        return False
    log.info("config.saved")
    return True
