from __future__ import annotations

import json
import os
import tempfile
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable

from hexmix.core.octets import NumericFormat
from hexmix.core.paths import config_path
from hexmix.core.settings import RenderConfig, check_columns, check_theme
from hexmix.ui.console import warn


# persisted defaults; color here is a preference the CLI may still turn off
DEFAULTS = RenderConfig(color_enabled=True)


def _on_off(value: object) -> str:
    return "on" if value else "off"


def _as_bool(raw: object) -> bool:
    if isinstance(raw, bool):
        return raw
    text = str(raw).strip().lower()
    if text in ("1", "true", "on", "yes"):
        return True
    if text in ("0", "false", "off", "no"):
        return False
    raise ValueError(f"invalid boolean: {raw} (use on/off)")


def _as_columns(raw: object) -> int:
    # JSON true/false would otherwise pass as 1/0
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        raise ValueError(f"invalid integer: {raw}")
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"invalid integer: {raw}") from exc
    return check_columns(value)


def _as_format(raw: object) -> NumericFormat:
    if not isinstance(raw, str):
        raise ValueError(f"invalid format: {raw}")
    return NumericFormat.from_code(raw.strip())


def _as_theme(raw: object) -> str:
    if not isinstance(raw, str):
        raise ValueError(f"invalid theme: {raw}")
    return check_theme(raw.strip())


@dataclass(frozen=True)
class Option:
    """A persisted RenderConfig field: its file key, coercion and display."""

    key: str
    field: str
    kind: str
    coerce: Callable[[object], object]
    encode: Callable[[object], object] = lambda value: value
    show: Callable[[object], str] = str


OPTIONS: tuple[Option, ...] = (
    Option("columns", "columns", "int", _as_columns),
    Option(
        "format",
        "numeric_format",
        "o|x|X|b",
        _as_format,
        encode=lambda fmt: fmt.value,
        show=lambda fmt: fmt.value,
    ),
    Option("color", "color_enabled", "bool", _as_bool, show=_on_off),
    Option("prefix", "prefix", "bool", _as_bool, show=_on_off),
    Option("theme", "theme", "theme", _as_theme),
)


def find_option(key: str) -> Option:
    for option in OPTIONS:
        if option.key == key:
            return option
    raise ValueError(f"unknown setting: {key}")


def show_option(config: RenderConfig, key: str) -> str:
    option = find_option(key)
    return option.show(getattr(config, option.field))


def update_config(config: RenderConfig, key: str, raw: object) -> RenderConfig:
    option = find_option(key)
    return replace(config, **{option.field: option.coerce(raw)})


def load_config(path: Path | None = None) -> RenderConfig:
    """Read persisted defaults; a missing file yields DEFAULTS.

    Unreadable files and individual bad values are reported and skipped.
    """
    path = path or config_path()
    try:
        data = json.loads(path.read_text())
    except FileNotFoundError:
        return DEFAULTS
    except (OSError, ValueError) as exc:
        warn(f"ignoring config {path}: {exc}")
        return DEFAULTS

    if not isinstance(data, dict):
        warn(f"ignoring config {path}: expected an object")
        return DEFAULTS

    config = DEFAULTS
    for option in OPTIONS:
        if option.key not in data:
            continue
        try:
            config = update_config(config, option.key, data[option.key])
        except ValueError as exc:
            warn(f"ignoring {option.key} in {path}: {exc}")
    return config


def save_config(config: RenderConfig, path: Path | None = None) -> Path:
    path = path or config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {option.key: option.encode(getattr(config, option.field)) for option in OPTIONS}
    with tempfile.NamedTemporaryFile("w", dir=path.parent, delete=False) as handle:
        json.dump(data, handle, indent=2)
        tmp_name = handle.name
    os.replace(tmp_name, path)
    return path
