"""Directory listing for the picker.

Children are ordered directories-first, then by path. The list is built once
per directory visit and never updated in place.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ListError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Entry:
    """One child of the browsed directory."""

    path: Path
    is_dir: bool

    @property
    def name(self) -> str:
        return self.path.name


def entry_sort_key(entry: Entry) -> tuple[bool, Path]:
    """Sort key placing directories before files, each group path-ordered."""
    return (not entry.is_dir, entry.path)


def list_entries(directory: Path) -> tuple[Entry, ...]:
    """Return sorted children of ``directory``.

    Directory classification follows symlinks, so a link to a directory is
    listed as a directory. Raises ``ListError`` when ``directory`` cannot be
    scanned.
    """
    entries: list[Entry] = []
    try:
        with os.scandir(directory) as it:
            for child in it:
                try:
                    is_dir = child.is_dir()
                except OSError:
                    is_dir = False
                entries.append(Entry(path=directory / child.name, is_dir=is_dir))
    except OSError as exc:
        raise ListError(directory, exc.strerror or str(exc)) from exc

    entries.sort(key=entry_sort_key)
    logger.debug("listed %d entries in %s", len(entries), directory)
    return tuple(entries)


def index_of_path(entries: tuple[Entry, ...], path: Path) -> int | None:
    """Return index of the entry whose path equals ``path``."""
    for idx, entry in enumerate(entries):
        if entry.path == path:
            return idx
    return None
