"""Exceptions raised by nxvsh.

Every failure surfaces as a subclass of :class:`NxvshError`; the
underlying OS, JSON or validation error is chained as ``__cause__``.
"""

from __future__ import annotations


class NxvshError(Exception):
    """Base class for all nxvsh errors."""


class ProcessSpawnError(NxvshError):
    """The VSH binary could not be launched."""

    def __init__(self, binary: str, reason: str) -> None:
        super().__init__(f"cannot launch {binary}: {reason}")
        self.binary = binary


class DecodingError(NxvshError):
    """Process output is not valid text in the expected encoding."""

    def __init__(self, stream: str, encoding: str, reason: str) -> None:
        super().__init__(f"{stream} is not valid {encoding}: {reason}")
        self.stream = stream
        self.encoding = encoding


class MalformedPayloadError(NxvshError):
    """JSON output is invalid or does not match the expected schema."""


class ParseError(NxvshError):
    """A timestamp or time line does not have the expected layout."""


class MetadataError(NxvshError):
    """Filesystem metadata of the saved configuration could not be read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot read metadata of {path}: {reason}")
        self.path = path


class CommandFailedError(NxvshError):
    """A query command exited with a non-zero status."""

    def __init__(self, command: str, returncode: int, stderr: str = "") -> None:
        detail = stderr.strip() or "no error output"
        super().__init__(f"'{command}' exited with status {returncode}: {detail}")
        self.command = command
        self.returncode = returncode
        self.stderr = stderr
