"""Frame building: picker state to abstract draw instructions.

The output is a flat list of draw ops for one full redraw. Only rows inside
the visible window are emitted.
The terminal layer turns the ops into escape sequences.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .layout import VISIBLE_ROWS, window
from .state import PickerState


@dataclass(frozen=True)
class ClearScreen:
    pass


@dataclass(frozen=True)
class DrawLine:
    text: str
    role: str = ""
    prefix: str = ""
    selected: bool = False


DrawOp = Union[ClearScreen, DrawLine]


def canonical_path(path: Path) -> Path:
    """Return absolute, symlink-resolved ``path``; absolute form if that fails."""
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path.absolute()


def build_frame(state: PickerState, rows: int = VISIBLE_ROWS) -> list[DrawOp]:
    ops: list[DrawOp] = [
        ClearScreen(),
        DrawLine(str(canonical_path(state.path)), role="path", prefix=" "),
        DrawLine(state.query, role="query", prefix="> "),
    ]
    cursor = state.effective_cursor
    skip, take = window(len(state.entries), cursor, rows)
    for idx in range(skip, skip + take):
        entry = state.entries[idx]
        ops.append(
            DrawLine(
                entry.name,
                role="dir" if entry.is_dir else "file",
                prefix="  ",
                selected=idx == cursor,
            )
        )
    return ops
