from __future__ import annotations

import sys

PREFIX = "[hexmix]"


def _emit(level: str, msg: str) -> None:
    print(f"{PREFIX} {level}: {msg}", file=sys.stderr)


def warn(msg: str) -> None:
    _emit("warn", msg)


def err(msg: str) -> None:
    _emit("error", msg)
