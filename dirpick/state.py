"""Navigation state machine.

The picker state is one immutable value: the browsed directory, its listing,
and a cursor mode. ``transition`` maps ``(state, event)`` to a new state plus
an effect for the event loop to carry out. Listing is injected so transitions
can be exercised without touching the filesystem.

Cursor modes:

* ``Browsing(cursor)``: query empty, the movement cursor selects.
* ``Filtering(movement_cursor, query, query_cursor)``: query non-empty, the
  query cursor selects; the movement cursor is kept for when the query is
  cleared.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from pathlib import Path
from typing import NamedTuple, Optional, Union

from .entries import Entry, index_of_path, list_entries
from .errors import ListError
from .keys import Event, TypeChar
from .matching import select_best_match

Lister = Callable[[Path], "tuple[Entry, ...]"]


@dataclass(frozen=True)
class Browsing:
    cursor: int = 0


@dataclass(frozen=True)
class Filtering:
    movement_cursor: int
    query: str
    query_cursor: int


CursorMode = Union[Browsing, Filtering]


@dataclass(frozen=True)
class PickerState:
    path: Path
    entries: tuple[Entry, ...]
    mode: CursorMode = Browsing()

    @classmethod
    def open(cls, path: Path, lister: Lister = list_entries) -> "PickerState":
        """List ``path`` and return a fresh browsing state for it."""
        return cls(path=path, entries=tuple(lister(path)))

    @property
    def query(self) -> str:
        return self.mode.query if isinstance(self.mode, Filtering) else ""

    @property
    def movement_cursor(self) -> int:
        if isinstance(self.mode, Filtering):
            return self.mode.movement_cursor
        return self.mode.cursor

    @property
    def query_cursor(self) -> int:
        return self.mode.query_cursor if isinstance(self.mode, Filtering) else 0

    @property
    def effective_cursor(self) -> int:
        """Index that is highlighted and acted upon."""
        if isinstance(self.mode, Filtering):
            return self.mode.query_cursor
        return self.mode.cursor

    @property
    def selected_entry(self) -> Optional[Entry]:
        idx = self.effective_cursor
        if 0 <= idx < len(self.entries):
            return self.entries[idx]
        return None


@dataclass(frozen=True)
class Continue:
    pass


@dataclass(frozen=True)
class Confirm:
    path: Path


@dataclass(frozen=True)
class Cancel:
    pass


Effect = Union[Continue, Confirm, Cancel]
CONTINUE = Continue()
CANCEL = Cancel()


class Transition(NamedTuple):
    state: PickerState
    effect: Effect
    error: Optional[ListError] = None


def _navigate(path: Path, lister: Lister) -> PickerState:
    entries = tuple(lister(path))
    return PickerState(path=path, entries=entries)


def _move(state: PickerState, delta: int) -> PickerState:
    last = max(0, len(state.entries) - 1)
    cursor = min(max(state.effective_cursor + delta, 0), last)
    return replace(state, mode=Browsing(cursor))


def _descend(state: PickerState, lister: Lister) -> PickerState:
    entry = state.selected_entry
    if entry is None or not entry.is_dir:
        return state
    return _navigate(entry.path, lister)


def _ascend(state: PickerState, lister: Lister) -> PickerState:
    previous = state.path
    parent = previous.parent
    entries = tuple(lister(parent))
    cursor = index_of_path(entries, previous)
    return PickerState(path=parent, entries=entries, mode=Browsing(0 if cursor is None else cursor))


def _type_char(state: PickerState, char: str) -> PickerState:
    if isinstance(state.mode, Filtering):
        movement_cursor = state.mode.movement_cursor
        query = state.mode.query + char
        previous = state.mode.query_cursor
    else:
        movement_cursor = state.mode.cursor
        query = char
        previous = 0
    match = select_best_match(query, state.entries)
    query_cursor = previous if match is None else match
    return replace(state, mode=Filtering(movement_cursor, query, query_cursor))


def _clear_query(state: PickerState) -> PickerState:
    if isinstance(state.mode, Browsing):
        return state
    return replace(state, mode=Browsing(state.mode.movement_cursor))


def transition(
    state: PickerState,
    event: Union[Event, TypeChar],
    lister: Lister = list_entries,
) -> Transition:
    """Apply one key event to ``state``.

    A listing failure while descending or ascending leaves ``state`` as it
    was and is reported through ``Transition.error``.
    """
    if isinstance(event, TypeChar):
        return Transition(_type_char(state, event.char), CONTINUE)

    if event is Event.MOVE_UP:
        return Transition(_move(state, -1), CONTINUE)
    if event is Event.MOVE_DOWN:
        return Transition(_move(state, 1), CONTINUE)
    if event is Event.DESCEND or event is Event.ASCEND:
        try:
            if event is Event.DESCEND:
                new_state = _descend(state, lister)
            else:
                new_state = _ascend(state, lister)
        except ListError as exc:
            return Transition(state, CONTINUE, exc)
        return Transition(new_state, CONTINUE)
    if event is Event.CONFIRM_SELECTED:
        entry = state.selected_entry
        if entry is not None and entry.is_dir:
            return Transition(state, Confirm(entry.path))
        return Transition(state, CONTINUE)
    if event is Event.CONFIRM_CURRENT:
        return Transition(state, Confirm(state.path))
    if event is Event.CLEAR_QUERY:
        return Transition(_clear_query(state), CONTINUE)
    if event is Event.CANCEL:
        return Transition(state, CANCEL)
    return Transition(state, CONTINUE)
