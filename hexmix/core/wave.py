from __future__ import annotations

import math


VALUES_PER_LINE = 10


def wave_values(length: int) -> list[float]:
    """Quarter sine wave sampled at ``length`` points, rising from 0 toward 1."""
    return [math.sin((y / length) * math.pi / 2.0) for y in range(length)]


def wave_lines(length: int, places: int = 4) -> list[str]:
    lines: list[str] = []
    current: list[str] = []
    for y, value in enumerate(wave_values(length)):
        current.append(f"{value:.{places}f},")
        if y % VALUES_PER_LINE == VALUES_PER_LINE - 1:
            lines.append("".join(current))
            current = []
    lines.append("".join(current))
    return lines
