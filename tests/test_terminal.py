"""Tests for terminal mode control and frame encoding.

Verifies raw-mode lifecycle safety and the escape sequences produced for a
frame. These guard the low-level terminal contract used by the event loop.
"""

from __future__ import annotations

import termios
import unittest
from unittest import mock

from dirpick.errors import TerminalError
from dirpick.render import ClearScreen, DrawLine
from dirpick.terminal import TerminalController, encode_frame
from dirpick.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _recording_write(log: list[bytes]):
    def write(fd: int, data) -> int:
        log.append(bytes(data))
        return len(data)

    return write


class TerminalBehaviorTests(unittest.TestCase):
    def test_enable_and_disable_tui_mode_use_alternate_screen_sequences(self) -> None:
        saved_state = [1, 2, 3]
        written: list[bytes] = []

        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=saved_state), mock.patch(
            "dirpick.terminal.tty.setraw"
        ) as setraw_mock, mock.patch(
            "dirpick.terminal.os.write", side_effect=_recording_write(written)
        ), mock.patch("dirpick.terminal.termios.tcsetattr") as setattr_mock:
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.enable_tui_mode()
            controller.disable_tui_mode()

        setraw_mock.assert_called_once_with(0, termios.TCSAFLUSH)
        self.assertEqual(written, [b"\x1b[?1049h\x1b[?25l", b"\x1b[?25h\x1b[?1049l"])
        setattr_mock.assert_called_once_with(0, termios.TCSAFLUSH, saved_state)

    def test_non_tty_stdin_raises_terminal_error(self) -> None:
        with mock.patch("dirpick.terminal.termios.tcgetattr", side_effect=termios.error(25, "not a tty")):
            with self.assertRaises(TerminalError):
                TerminalController(stdin_fd=0, stdout_fd=1)

    def test_raw_mode_restores_terminal_after_exception(self) -> None:
        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode") as enable_mock, mock.patch.object(
            controller, "disable_tui_mode"
        ) as disable_mock:
            with self.assertRaises(RuntimeError):
                with controller.raw_mode():
                    raise RuntimeError("boom")

        enable_mock.assert_called_once()
        disable_mock.assert_called_once()

    def test_raw_mode_setup_failure_propagates_after_restoring(self) -> None:
        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        body = mock.Mock()
        with mock.patch.object(
            controller, "enable_tui_mode", side_effect=TerminalError("no raw mode")
        ), mock.patch.object(controller, "disable_tui_mode") as disable_mock:
            with self.assertRaises(TerminalError):
                with controller.raw_mode():
                    body()

        body.assert_not_called()
        disable_mock.assert_called_once()

    def test_teardown_failure_is_logged_not_raised(self) -> None:
        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=[0]):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)

        with mock.patch.object(controller, "enable_tui_mode"), mock.patch.object(
            controller, "disable_tui_mode", side_effect=OSError(5, "I/O error")
        ), self.assertLogs("dirpick.terminal", level="ERROR") as logs:
            with controller.raw_mode():
                pass

        self.assertIn("teardown failed", logs.output[0])

    def test_draw_writes_encoded_frame(self) -> None:
        written: list[bytes] = []
        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "dirpick.terminal.os.write", side_effect=_recording_write(written)
        ):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.draw([ClearScreen(), DrawLine("x", role="file", prefix="  ")], PLAIN_THEME)

        self.assertEqual(written, [b"\x1b[2J\x1b[H\r  x\r\n"])

    def test_partial_writes_are_completed(self) -> None:
        chunks: list[bytes] = []

        def short_write(fd: int, data) -> int:
            chunk = bytes(data[:3])
            chunks.append(chunk)
            return len(chunk)

        with mock.patch("dirpick.terminal.termios.tcgetattr", return_value=[0]), mock.patch(
            "dirpick.terminal.os.write", side_effect=short_write
        ):
            controller = TerminalController(stdin_fd=0, stdout_fd=1)
            controller.draw([DrawLine("abcdefgh")], PLAIN_THEME)

        self.assertEqual(b"".join(chunks), b"\rabcdefgh\r\n")


class EncodeFrameTests(unittest.TestCase):
    def test_default_theme_styles_each_role(self) -> None:
        frame = encode_frame(
            [
                ClearScreen(),
                DrawLine("/tmp", role="path", prefix=" "),
                DrawLine("q", role="query", prefix="> "),
                DrawLine("src", role="dir", prefix="  ", selected=True),
                DrawLine("a.txt", role="file", prefix="  "),
                DrawLine("b.txt", role="file", prefix="  ", selected=True),
            ],
            DEFAULT_THEME,
        ).decode("utf-8")

        self.assertEqual(
            frame,
            "\x1b[2J\x1b[H"
            "\r \x1b[33m/tmp\x1b[0m\r\n"
            "\r> \x1b[31mq\x1b[0m\r\n"
            "\r  \x1b[34m\x1b[42msrc\x1b[0m\r\n"
            "\r  a.txt\r\n"
            "\r  \x1b[42mb.txt\x1b[0m\r\n",
        )

    def test_plain_theme_keeps_selection_visible(self) -> None:
        frame = encode_frame([DrawLine("src", role="dir", selected=True)], PLAIN_THEME)
        self.assertEqual(frame, b"\r\x1b[7msrc\x1b[0m\r\n")


if __name__ == "__main__":
    unittest.main()
