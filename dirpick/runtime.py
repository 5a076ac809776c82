"""Interactive event loop for the picker.

Blocks on one key at a time, applies it to the navigation state, redraws, and
repeats until a confirm or cancel effect. The confirmed path is written to the
result stream and flushed before the terminal is restored.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .entries import list_entries
from .input import read_key
from .keys import event_for_key
from .render import build_frame, canonical_path
from .state import Cancel, Confirm, Lister, PickerState, transition
from .terminal import TerminalController
from .ui_theme import UITheme

logger = logging.getLogger(__name__)


def run_main_loop(
    state: PickerState,
    terminal: TerminalController,
    theme: UITheme,
    result_stream: TextIO,
    key_source: Callable[[], str],
    lister: Lister = list_entries,
) -> Path | None:
    """Drive the picker until the user confirms or cancels.

    Returns the emitted path on confirm, ``None`` on cancel or end of input.
    Must be called inside ``terminal.raw_mode()``.
    """
    terminal.draw(build_frame(state), theme)
    while True:
        key = key_source()
        if not key:
            logger.debug("input closed; cancelling")
            return None
        event = event_for_key(key)
        result = transition(state, event, lister)
        if result.error is not None:
            logger.warning("navigation failed: %s", result.error)
        state = result.state

        if isinstance(result.effect, Confirm):
            chosen = canonical_path(result.effect.path)
            result_stream.write(str(chosen))
            result_stream.flush()
            logger.debug("confirmed %s", chosen)
            return chosen
        if isinstance(result.effect, Cancel):
            logger.debug("cancelled in %s", state.path)
            return None

        terminal.draw(build_frame(state), theme)


def run_picker(
    start_path: Path,
    theme: UITheme,
    stdin_fd: int,
    stdout_fd: int,
    result_stream: TextIO,
) -> Path | None:
    """List ``start_path``, take over the terminal, and run the loop.

    Raises ``ListError`` if the start directory is unreadable and
    ``TerminalError`` if the terminal cannot be acquired; both happen before
    anything is drawn.
    """
    state = PickerState.open(start_path)
    terminal = TerminalController(stdin_fd, stdout_fd)
    with terminal.raw_mode():
        return run_main_loop(
            state,
            terminal,
            theme,
            result_stream,
            key_source=lambda: read_key(stdin_fd),
        )
