from __future__ import annotations

from dataclasses import dataclass

from hexmix.core.octets import NumericFormat
from hexmix.ui.arrays import ArrayGrammar
from hexmix.ui.theme import DEFAULT_THEME, THEMES


DEFAULT_COLUMNS = 16


def check_columns(value: int) -> int:
    if value < 1:
        raise ValueError(f"columns must be positive: {value}")
    return value


def check_theme(name: str) -> str:
    if name not in THEMES:
        choices = ", ".join(sorted(THEMES))
        raise ValueError(f"unknown theme: {name} (choices: {choices})")
    return name


@dataclass(frozen=True)
class RenderConfig:
    """Resolved output options for one render.

    ``color_enabled`` is final here; environment and tty checks happen
    before the config is built.
    """

    columns: int = DEFAULT_COLUMNS
    numeric_format: NumericFormat = NumericFormat.LOWER_HEX
    color_enabled: bool = False
    array_target: ArrayGrammar | None = None
    prefix: bool = True
    theme: str = DEFAULT_THEME.name

    def __post_init__(self) -> None:
        check_columns(self.columns)
        check_theme(self.theme)
