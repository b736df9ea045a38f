from __future__ import annotations

from enum import Enum


class NumericFormat(Enum):
    OCTAL = "o"
    LOWER_HEX = "x"
    UPPER_HEX = "X"
    BINARY = "b"

    @classmethod
    def from_code(cls, code: str) -> "NumericFormat":
        for fmt in cls:
            if fmt.value == code:
                return fmt
        choices = ", ".join(fmt.value for fmt in cls)
        raise ValueError(f"unknown format: {code} (choices: {choices})")

    @property
    def digits(self) -> int:
        return _DIGITS[self]

    @property
    def base(self) -> int:
        return _BASES[self]

    @property
    def prefix(self) -> str:
        if self in (NumericFormat.LOWER_HEX, NumericFormat.UPPER_HEX):
            return "0x"
        return ""


_DIGITS = {
    NumericFormat.OCTAL: 3,
    NumericFormat.LOWER_HEX: 2,
    NumericFormat.UPPER_HEX: 2,
    NumericFormat.BINARY: 8,
}

_BASES = {
    NumericFormat.OCTAL: 8,
    NumericFormat.LOWER_HEX: 16,
    NumericFormat.UPPER_HEX: 16,
    NumericFormat.BINARY: 2,
}

_SPECS = {
    NumericFormat.OCTAL: "03o",
    NumericFormat.LOWER_HEX: "02x",
    NumericFormat.UPPER_HEX: "02X",
    NumericFormat.BINARY: "08b",
}


class ColorClass(Enum):
    NULL = "null"
    WHITESPACE = "whitespace"
    PRINTABLE = "printable"
    CONTROL = "control"
    HIGH = "high"

    @property
    def role(self) -> str:
        return f"byte_{self.value}"


def _build_classes() -> tuple[ColorClass, ...]:
    table: list[ColorClass] = []
    for value in range(256):
        if value == 0x00:
            table.append(ColorClass.NULL)
        elif value == 0x20 or 0x09 <= value <= 0x0D:
            table.append(ColorClass.WHITESPACE)
        elif 0x21 <= value <= 0x7E:
            table.append(ColorClass.PRINTABLE)
        elif value < 0x80:
            table.append(ColorClass.CONTROL)
        else:
            table.append(ColorClass.HIGH)
    return tuple(table)


_CLASSES = _build_classes()

PLACEHOLDER = "."


def token_width(fmt: NumericFormat, prefix: bool = True) -> int:
    width = fmt.digits
    if prefix:
        width += len(fmt.prefix)
    return width


def format_octet(value: int, fmt: NumericFormat, prefix: bool = True) -> str:
    """Render one byte as a fixed-width token in the given base.

    Hex tokens carry a ``0x`` prefix unless ``prefix`` is False; octal and
    binary tokens are bare digits.
    """
    digits = format(value, _SPECS[fmt])
    if prefix:
        return f"{fmt.prefix}{digits}"
    return digits


def parse_octet(token: str, fmt: NumericFormat) -> int:
    return int(token, fmt.base)


def classify_byte(value: int) -> ColorClass:
    return _CLASSES[value]


def ascii_glyph(value: int) -> str:
    if 0x20 <= value <= 0x7E:
        return chr(value)
    return PLACEHOLDER
