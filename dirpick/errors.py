"""Exception types shared across the picker."""

from __future__ import annotations

from pathlib import Path


class DirpickError(Exception):
    """Base class for picker failures."""


class ListError(DirpickError):
    """A directory could not be listed (permissions, vanished, not a directory)."""

    def __init__(self, path: Path, reason: str = "") -> None:
        self.path = path
        self.reason = reason
        message = f"cannot list {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class TerminalError(DirpickError):
    """Raw-mode or alternate-screen setup/teardown failed."""
