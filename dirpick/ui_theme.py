"""UI theme definitions and selection helpers.

Themes are ANSI palettes keyed by the semantic roles the renderer emits.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the terminal draw layer."""

    name: str
    path: str
    query: str
    dir: str
    file: str
    selected: str
    reset: str

    def foreground(self, role: str) -> str:
        """Return the foreground code for a draw role (empty when unknown)."""
        return getattr(self, role, "") if role in {"path", "query", "dir", "file"} else ""


DEFAULT_THEME = UITheme(
    name="default",
    path="\033[33m",
    query="\033[31m",
    dir="\033[34m",
    file="",
    selected="\033[42m",
    reset="\033[0m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    path="\033[1;38;5;45m",
    query="\033[38;5;215m",
    dir="\033[1;38;5;39m",
    file="\033[38;5;252m",
    selected="\033[48;5;24m",
    reset="\033[0m",
)

PLAIN_THEME = UITheme(
    name="plain",
    path="",
    query="",
    dir="",
    file="",
    selected="\033[7m",
    reset="\033[0m",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
    PLAIN_THEME.name: PLAIN_THEME,
}


def available_theme_names() -> list[str]:
    return list(_THEMES)


def get_theme(name: str | None) -> UITheme:
    """Resolve a theme by name, falling back to the default theme."""
    if not name:
        return DEFAULT_THEME
    return _THEMES.get(name.strip().lower(), DEFAULT_THEME)
