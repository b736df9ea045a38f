from __future__ import annotations

import os
from typing import BinaryIO


class SourceError(Exception):
    pass


def read_stream(stream: BinaryIO, limit: int | None = None) -> bytes:
    if limit:
        return stream.read(limit)
    return stream.read()


def read_bytes(path: str, limit: int | None = None) -> bytes:
    if os.path.isdir(path):
        raise SourceError(f"{path}: is a directory")
    try:
        with open(path, "rb") as handle:
            return read_stream(handle, limit)
    except FileNotFoundError as exc:
        raise SourceError(f"{path}: no such file") from exc
    except OSError as exc:
        reason = exc.strerror or str(exc)
        raise SourceError(f"{path}: {reason}") from exc
