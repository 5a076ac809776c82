"""Command-line front door for dirpick.

Parses CLI options, resolves the start directory and theme, configures
logging, then hands over to the interactive runtime. The chosen directory is
printed on stderr so a shell wrapper can ``cd`` into it.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from .config import load_theme_name, save_theme_name
from .errors import DirpickError
from .runtime import run_picker
from .ui_theme import PLAIN_THEME, UITheme, available_theme_names, get_theme

logger = logging.getLogger("dirpick")

EXIT_CONFIRMED = 0
EXIT_CANCELLED = 1
EXIT_FAILED = 2

SHELL_EPILOG = """\
The selected directory is written to stderr. Example shell function:

  dp() { local d; d="$(dirpick "$@" 2>&1 >/dev/tty)" && cd "$d"; }

Exit status: 0 after a pick, 1 when cancelled, 2 when startup fails.
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dirpick",
        description="Pick a directory interactively with a fuzzy jump query.",
        epilog=SHELL_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=None, help="Start directory. Defaults to current directory.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--save-theme", action="store_true", help="Remember --theme for later runs.")
    parser.add_argument("--no-color", action="store_true", help="Disable colors (selection stays visible).")
    parser.add_argument("--log-file", metavar="FILE", default=None, help="Append debug log records to FILE.")
    return parser


def configure_logging(log_file: str | None) -> None:
    """Attach a file handler when requested; stdout and stderr stay clean."""
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def resolve_theme(theme_name: str | None, no_color: bool) -> UITheme:
    if no_color:
        return PLAIN_THEME
    if theme_name is None:
        theme_name = load_theme_name()
    return get_theme(theme_name)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run the picker.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits 0 after a confirmed pick, 1 on cancel, and 2 when
    startup fails.
    """
    parser = build_parser()
    args = parser.parse_args()
    configure_logging(args.log_file)

    if args.save_theme:
        if args.theme is None:
            parser.error("--save-theme requires --theme")
        save_theme_name(args.theme)

    if default_path is None:
        default_path = Path.cwd()
    # Collapse ".." so ascending walks the real parent chain.
    start = Path(os.path.abspath(args.path or default_path))
    if not start.is_dir():
        raise SystemExit(f"Not a directory: {start}")

    theme = resolve_theme(args.theme, args.no_color)
    try:
        chosen = run_picker(
            start,
            theme,
            stdin_fd=sys.stdin.fileno(),
            stdout_fd=sys.stdout.fileno(),
            result_stream=sys.stderr,
        )
    except DirpickError as exc:
        logger.error("startup failed: %s", exc)
        print(f"dirpick: {exc}", file=sys.stderr)
        raise SystemExit(EXIT_FAILED) from exc
    raise SystemExit(EXIT_CONFIRMED if chosen is not None else EXIT_CANCELLED)


if __name__ == "__main__":
    main()
