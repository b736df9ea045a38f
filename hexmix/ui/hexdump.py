from __future__ import annotations

from typing import Callable

from hexmix.core.octets import (
    NumericFormat,
    ascii_glyph,
    classify_byte,
    format_octet,
    token_width,
)


MIN_ADDR_WIDTH = 6
SUMMARY_LABEL = "   bytes:"


def address_width(length: int, bytes_per_line: int) -> int:
    if length <= 0:
        return MIN_ADDR_WIDTH
    last_row = ((length - 1) // bytes_per_line) * bytes_per_line
    return max(MIN_ADDR_WIDTH, len(f"{last_row:x}"))


def format_row(
    offset: int,
    chunk: bytes,
    addr_width: int,
    bytes_per_line: int,
    fmt: NumericFormat = NumericFormat.LOWER_HEX,
    prefix: bool = True,
    colorize: Callable[[str, str], str] | None = None,
) -> str:
    octets: list[str] = []
    glyphs: list[str] = []
    for value in chunk:
        token = format_octet(value, fmt, prefix)
        glyph = ascii_glyph(value)
        if colorize:
            role = classify_byte(value).role
            token = colorize(token, role)
            glyph = colorize(glyph, role)
        octets.append(f"{token} ")
        glyphs.append(glyph)

    missing = bytes_per_line - len(chunk)
    pad = " " * ((token_width(fmt, prefix) + 1) * missing)
    addr_text = f"0x{offset:0{addr_width}x}"
    if colorize:
        addr_text = colorize(addr_text, "addr")
    return f"{addr_text}: {''.join(octets)}{pad}{''.join(glyphs)}"


def summary_line(length: int, colorize: Callable[[str, str], str] | None = None) -> str:
    line = f"{SUMMARY_LABEL} {length}"
    if colorize:
        line = colorize(line, "summary")
    return line


def hexdump(
    data: bytes,
    bytes_per_line: int = 16,
    fmt: NumericFormat = NumericFormat.LOWER_HEX,
    prefix: bool = True,
    colorize: Callable[[str, str], str] | None = None,
) -> list[str]:
    if bytes_per_line < 1:
        raise ValueError(f"bytes_per_line must be positive: {bytes_per_line}")

    addr_width = address_width(len(data), bytes_per_line)
    lines: list[str] = []
    for offset in range(0, len(data), bytes_per_line):
        chunk = data[offset : offset + bytes_per_line]
        lines.append(
            format_row(
                offset,
                chunk,
                addr_width,
                bytes_per_line,
                fmt=fmt,
                prefix=prefix,
                colorize=colorize,
            )
        )
    lines.append(summary_line(len(data), colorize))
    return lines
