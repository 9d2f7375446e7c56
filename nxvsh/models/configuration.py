"""Startup-configuration status record."""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class ConfigurationStatus(BaseModel):
    """Whether a startup configuration is saved, and when it last changed."""

    model_config = ConfigDict(frozen=True)

    present: bool
    last_modified: Optional[datetime] = None

    @model_validator(mode="after")
    def _timestamp_requires_presence(self) -> "ConfigurationStatus":
        if not self.present and self.last_modified is not None:
            raise ValueError("last_modified is only set when a configuration is present")
        return self
