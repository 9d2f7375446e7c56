"""Library settings loaded from environment variables."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """All configuration is driven by environment variables."""

    # VSH shell
    nxvsh_binary: str = "/isan/bin/vsh"
    nxvsh_output_encoding: str = "utf-8"

    # Configuration status backend
    nxvsh_config_status_strategy: Literal["shell", "filesystem"] = "shell"
    nxvsh_config_archive_path: str = Field(default="/mnt/pss/startup-config.tar.gz")

    # Neighbor discovery backend
    nxvsh_neighbor_source: Literal["lldp-detail", "lldp", "cdp"] = "lldp-detail"

    # Logging
    nxvsh_log_level: str = "INFO"
    nxvsh_log_json: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


# Singleton – import this from anywhere
settings = Settings()
