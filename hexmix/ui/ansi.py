from __future__ import annotations

import re
from enum import Enum
from typing import Union


ESC = "\x1b["
RESET = "\x1b[0m"

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


class Style(Enum):
    BOLD = "1"
    DIM = "2"
    UNDERLINE = "4"


class Color(Enum):
    BLACK = "30"
    RED = "31"
    GREEN = "32"
    YELLOW = "33"
    BLUE = "34"
    MAGENTA = "35"
    CYAN = "36"
    WHITE = "37"
    BRIGHT_BLACK = "90"
    BRIGHT_RED = "91"
    BRIGHT_GREEN = "92"
    BRIGHT_YELLOW = "93"
    BRIGHT_BLUE = "94"
    BRIGHT_MAGENTA = "95"
    BRIGHT_CYAN = "96"
    BRIGHT_WHITE = "97"


AnsiToken = Union[Style, Color]


def escape(tokens: tuple[AnsiToken, ...]) -> str:
    codes = [token.value for token in tokens]
    if not codes:
        return ""
    return f"{ESC}{';'.join(codes)}m"


def strip_ansi(text: str) -> str:
    return _ANSI_RE.sub("", text)
