from __future__ import annotations

from typing import TextIO

from hexmix.core.settings import RenderConfig
from hexmix.ui.arrays import emit_array
from hexmix.ui.hexdump import hexdump
from hexmix.ui.theme import THEMES


def render_lines(data: bytes, config: RenderConfig) -> list[str]:
    if config.array_target is not None:
        return emit_array(data, config.array_target, bytes_per_line=config.columns)

    paint = THEMES[config.theme].paint if config.color_enabled else None
    return hexdump(
        data,
        bytes_per_line=config.columns,
        fmt=config.numeric_format,
        prefix=config.prefix,
        colorize=paint,
    )


def render(data: bytes, config: RenderConfig) -> str:
    return "\n".join(render_lines(data, config))


def write_render(data: bytes, config: RenderConfig, sink: TextIO) -> None:
    for line in render_lines(data, config):
        sink.write(line)
        sink.write("\n")
