from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from hexmix.core.octets import NumericFormat, format_octet


INDENT = "    "


class ArrayGrammar(Enum):
    RUST = "r"
    C = "c"
    GO = "g"
    PYTHON = "p"
    KOTLIN = "k"
    JAVA = "j"
    SWIFT = "s"
    FSHARP = "f"

    @classmethod
    def from_code(cls, code: str) -> "ArrayGrammar":
        for grammar in cls:
            if grammar.value == code:
                return grammar
        choices = ", ".join(grammar.value for grammar in cls)
        raise ValueError(f"unknown array format: {code} (choices: {choices})")


@dataclass(frozen=True)
class ArrayTemplate:
    header: str
    footer: str
    separator: str = ", "
    suffix: str = ""
    trailing_separator: bool = False

    def render_header(self, length: int) -> str:
        return self.header.format(n=length)


# header strings use str.format; literal braces are doubled
TEMPLATES: dict[ArrayGrammar, ArrayTemplate] = {
    ArrayGrammar.RUST: ArrayTemplate(header="let ARRAY: [u8; {n}] = [", footer="];"),
    ArrayGrammar.C: ArrayTemplate(header="unsigned char ARRAY[{n}] = {{", footer="};"),
    ArrayGrammar.GO: ArrayTemplate(
        header="a := [{n}]byte{{",
        footer="}",
        trailing_separator=True,
    ),
    ArrayGrammar.PYTHON: ArrayTemplate(header="a = [", footer="]"),
    ArrayGrammar.KOTLIN: ArrayTemplate(header="val a = byteArrayOf(", footer=")"),
    ArrayGrammar.JAVA: ArrayTemplate(header="byte[] a = new byte[]{{", footer="};"),
    ArrayGrammar.SWIFT: ArrayTemplate(header="let a: [UInt8] = [", footer="]"),
    ArrayGrammar.FSHARP: ArrayTemplate(
        header="let a = [|",
        footer="|]",
        separator="; ",
        suffix="uy",
    ),
}


def template_for(grammar: ArrayGrammar) -> ArrayTemplate:
    return TEMPLATES[grammar]


def emit_array(data: bytes, grammar: ArrayGrammar, bytes_per_line: int = 16) -> list[str]:
    """Render ``data`` as an array literal declaration.

    Elements are lowercase ``0x`` hex tokens, ``bytes_per_line`` per body
    line. The separator after the last element of a wrapped line keeps its
    punctuation but drops the trailing blank.
    """
    if bytes_per_line < 1:
        raise ValueError(f"bytes_per_line must be positive: {bytes_per_line}")

    template = template_for(grammar)
    tail = template.separator.rstrip()
    elements = [
        f"{format_octet(b, NumericFormat.LOWER_HEX)}{template.suffix}" for b in data
    ]

    lines = [template.render_header(len(data))]
    for start in range(0, len(elements), bytes_per_line):
        row = elements[start : start + bytes_per_line]
        body = template.separator.join(row)
        is_last = start + bytes_per_line >= len(elements)
        if not is_last or template.trailing_separator:
            body += tail
        lines.append(f"{INDENT}{body}")
    lines.append(template.footer)
    return lines
