"""Command-related data structures."""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict

from nxvsh.errors import CommandFailedError, MalformedPayloadError


class CommandResult(BaseModel):
    """Captured output of one VSH invocation."""

    model_config = ConfigDict(frozen=True)

    command: str
    stdout: str
    stderr: str = ""
    returncode: int = 0

    @property
    def success(self) -> bool:
        return self.returncode == 0

    @property
    def failed(self) -> bool:
        return not self.success

    def as_json(self) -> Any:
        """Parse stdout as a JSON document.

        Parsing happens on every call; nothing is cached on the result.
        """
        try:
            return json.loads(self.stdout)
        except json.JSONDecodeError as exc:
            raise MalformedPayloadError(
                f"output of '{self.command}' is not valid JSON: {exc}",
            ) from exc

    def raise_for_status(self) -> None:
        if self.failed:
            raise CommandFailedError(self.command, self.returncode, self.stderr)
