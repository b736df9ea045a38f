from __future__ import annotations

from dataclasses import dataclass

from hexmix.ui.ansi import RESET, AnsiToken, Color, Style, escape


@dataclass(frozen=True)
class Theme:
    name: str
    colors: dict[str, tuple[AnsiToken, ...]]

    def paint(self, text: str, role: str) -> str:
        prefix = escape(self.colors.get(role, ()))
        if not prefix:
            return text
        return f"{prefix}{text}{RESET}"


def _t(*tokens: AnsiToken) -> tuple[AnsiToken, ...]:
    return tokens


# byte_* roles are keyed by ColorClass.role
BASE_THEME = Theme(
    name="base",
    colors={
        "addr": _t(Color.CYAN),
        "summary": _t(Color.BRIGHT_BLACK),
        "byte_null": _t(Color.BRIGHT_BLACK),
        "byte_whitespace": _t(Color.BRIGHT_GREEN),
        "byte_printable": _t(Color.BRIGHT_WHITE),
        "byte_control": _t(Color.BRIGHT_YELLOW),
        "byte_high": _t(Color.BRIGHT_MAGENTA),
    },
)


DUSK = Theme(
    name="dusk",
    colors={
        "addr": _t(Color.WHITE),
        "summary": _t(Color.BRIGHT_BLACK),
        "byte_null": _t(Style.DIM, Color.WHITE),
        "byte_whitespace": _t(Color.GREEN),
        "byte_printable": _t(Color.CYAN),
        "byte_control": _t(Color.RED),
        "byte_high": _t(Style.BOLD, Color.BLUE),
    },
)


THEMES = {
    BASE_THEME.name: BASE_THEME,
    DUSK.name: DUSK,
}

DEFAULT_THEME = BASE_THEME
