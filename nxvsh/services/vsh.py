"""Blocking runner for the NX-OS VSH shell.

Each call spawns ``vsh -N -c <command>`` once and waits for it to exit.
There is no timeout and no retry: a hung shell blocks the caller, who is
expected to bound the call externally if needed.
"""

from __future__ import annotations

import subprocess
import time

from nxvsh.config import Settings, settings
from nxvsh.errors import DecodingError, ProcessSpawnError
from nxvsh.models.commands import CommandResult
from nxvsh.utils.logging import get_logger

log = get_logger(__name__)

# -N: non-interactive, -c: run the following command text
VSH_FLAGS: tuple[str, ...] = ("-N", "-c")


class VshExecutor:
    """Runs commands through the VSH binary configured in settings."""

    def __init__(self, cfg: Settings | None = None) -> None:
        self._cfg = cfg or settings

    @property
    def binary(self) -> str:
        return self._cfg.nxvsh_binary

    def _decode(self, stream: str, raw: bytes) -> str:
        encoding = self._cfg.nxvsh_output_encoding
        try:
            return raw.decode(encoding)
        except UnicodeDecodeError as exc:
            raise DecodingError(stream, encoding, str(exc)) from exc

    def run(self, command: str) -> CommandResult:
        """Run *command* and capture stdout, stderr and the exit status.

        A non-zero exit status is reported, not raised.
        """
        argv = [self.binary, *VSH_FLAGS, command]
        started = time.monotonic()
        try:
            proc = subprocess.run(argv, capture_output=True, check=False)
        except (OSError, ValueError) as exc:
            # ValueError: argv not passable to exec (e.g. embedded NUL)
            log.error("vsh.spawn_failed", binary=self.binary, error=str(exc))
            raise ProcessSpawnError(self.binary, str(exc)) from exc

        result = CommandResult(
            command=command,
            stdout=self._decode("stdout", proc.stdout),
            stderr=self._decode("stderr", proc.stderr),
            returncode=proc.returncode,
        )
        log.debug(
            "vsh.exec",
            command=command,
            rc=result.returncode,
            elapsed=round(time.monotonic() - started, 3),
        )
        return result


# ── Singleton instance ────────────────────────────────────────────────────

vsh = VshExecutor()
