"""Key bindings: raw key tokens to navigation events."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Event(enum.Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    DESCEND = "descend"
    ASCEND = "ascend"
    CONFIRM_SELECTED = "confirm_selected"
    CONFIRM_CURRENT = "confirm_current"
    CLEAR_QUERY = "clear_query"
    CANCEL = "cancel"
    IGNORED = "ignored"


@dataclass(frozen=True)
class TypeChar:
    """A printable character appended to the query."""

    char: str


# Tokens that are typed into the query as literal text.
TEXT_TOKENS = {"TAB": "\t"}

DEFAULT_BINDINGS: dict[str, Event] = {
    "ALT_k": Event.MOVE_UP,
    "ALT_j": Event.MOVE_DOWN,
    "ALT_l": Event.DESCEND,
    "ALT_h": Event.ASCEND,
    "UP": Event.MOVE_UP,
    "DOWN": Event.MOVE_DOWN,
    "RIGHT": Event.DESCEND,
    "LEFT": Event.ASCEND,
    "ALT_ENTER": Event.CONFIRM_SELECTED,
    "ENTER": Event.CONFIRM_CURRENT,
    "BACKSPACE": Event.CLEAR_QUERY,
    "CTRL_C": Event.CANCEL,
    "ESC": Event.CANCEL,
}


def event_for_key(key: str, bindings: dict[str, Event] | None = None) -> Event | TypeChar:
    """Translate a key token from ``read_key`` into a picker event."""
    table = DEFAULT_BINDINGS if bindings is None else bindings
    event = table.get(key)
    if event is not None:
        return event
    if key in TEXT_TOKENS:
        return TypeChar(TEXT_TOKENS[key])
    if len(key) == 1 and key.isprintable():
        return TypeChar(key)
    return Event.IGNORED
