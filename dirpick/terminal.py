"""Terminal control for the picker session.

Owns raw-mode lifecycle, alternate-screen switching, cursor visibility, and
turning draw ops into escape sequences. No other module writes escape codes.
"""

from __future__ import annotations

import contextlib
import logging
import os
import termios
import tty
from collections.abc import Iterable

from .errors import TerminalError
from .render import ClearScreen, DrawLine, DrawOp
from .ui_theme import UITheme

logger = logging.getLogger(__name__)

ENTER_TUI = b"\x1b[?1049h\x1b[?25l"
EXIT_TUI = b"\x1b[?25h\x1b[?1049l"
CLEAR_AND_HOME = "\x1b[2J\x1b[H"


def encode_frame(ops: Iterable[DrawOp], theme: UITheme) -> bytes:
    """Encode draw ops as one terminal write."""
    out: list[str] = []
    for op in ops:
        if isinstance(op, ClearScreen):
            out.append(CLEAR_AND_HOME)
            continue
        if not isinstance(op, DrawLine):
            continue
        fg = theme.foreground(op.role)
        bg = theme.selected if op.selected else ""
        styled = f"{fg}{bg}{op.text}{theme.reset}" if (fg or bg) else op.text
        out.append(f"\r{op.prefix}{styled}\r\n")
    return "".join(out).encode("utf-8", errors="replace")


class TerminalController:
    """Manage terminal mode transitions and frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalError(f"stdin is not a terminal: {exc}") from exc

    def _write(self, data: bytes) -> None:
        view = memoryview(data)
        while view:
            written = os.write(self.stdout_fd, view)
            view = view[written:]

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the text cursor hidden."""
        try:
            tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
            self._write(ENTER_TUI)
        except (OSError, termios.error) as exc:
            raise TerminalError(f"cannot enter raw mode: {exc}") from exc

    def disable_tui_mode(self) -> None:
        """Show the cursor, leave the alternate screen, and restore tty state."""
        self._write(EXIT_TUI)
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def draw(self, ops: Iterable[DrawOp], theme: UITheme) -> None:
        self._write(encode_frame(ops, theme))

    @contextlib.contextmanager
    def raw_mode(self):
        """Bracket code with TUI enter/exit; teardown failures are logged, not raised."""
        try:
            self.enable_tui_mode()
        except TerminalError:
            # Partial setup (raw mode without alternate screen) still needs undoing.
            self._restore_quietly()
            raise
        try:
            yield
        finally:
            self._restore_quietly()

    def _restore_quietly(self) -> None:
        try:
            self.disable_tui_mode()
        except (OSError, termios.error) as exc:
            logger.error("terminal teardown failed: %s", exc)
