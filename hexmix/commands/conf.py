from __future__ import annotations

import sys
from typing import Sequence

from hexmix.core.config import (
    DEFAULTS,
    OPTIONS,
    load_config,
    save_config,
    show_option,
    update_config,
)
from hexmix.core.paths import config_path
from hexmix.core.settings import RenderConfig
from hexmix.ui.console import PREFIX, err


Result = tuple[bool, str]


def run(argv: Sequence[str] | None = None, config: RenderConfig | None = None) -> Result:
    args = list(sys.argv[1:] if argv is None else argv)
    if config is None:
        config = load_config()

    if not args:
        return _handle_list(config)

    sub = args[0]
    rest = args[1:]
    if sub in ("-h", "--help", "help"):
        return True, _usage()
    if sub == "list":
        return _handle_list(config)
    if sub == "get":
        return _handle_get(config, rest)
    if sub == "set":
        return _handle_set(config, rest)
    if sub == "reset":
        return _save(DEFAULTS, "defaults restored")
    if sub == "path":
        return True, f"{PREFIX} config: {config_path()}"

    return False, f"unknown conf subcommand: {sub}\n{_usage()}"


def _handle_list(config: RenderConfig) -> Result:
    lines = [f"{PREFIX} conf settings:"]
    for option in OPTIONS:
        lines.append(f"{option.key} = {show_option(config, option.key)}")
    return True, "\n".join(lines)


def _handle_get(config: RenderConfig, args: list[str]) -> Result:
    if len(args) != 1:
        return False, _usage()
    try:
        value = show_option(config, args[0])
    except ValueError as exc:
        return False, str(exc)
    return True, f"{PREFIX} {args[0]} = {value}"


def _handle_set(config: RenderConfig, args: list[str]) -> Result:
    if len(args) != 2:
        return False, _usage()
    key, raw = args
    try:
        updated = update_config(config, key, raw)
    except ValueError as exc:
        return False, str(exc)
    return _save(updated, f"{key} = {show_option(updated, key)}")


def _save(config: RenderConfig, message: str) -> Result:
    try:
        path = save_config(config)
    except OSError as exc:
        return False, f"could not save config: {exc}"
    return True, f"{PREFIX} {message} ({path})"


def _usage() -> str:
    keys = ", ".join(f"{option.key} ({option.kind})" for option in OPTIONS)
    return (
        "usage: hexmix-conf [list|get <key>|set <key> <value>|reset|path]\n"
        f"keys: {keys}"
    )


def main() -> None:
    ok, message = run()
    if not ok:
        err(message)
        raise SystemExit(1)
    print(message)


if __name__ == "__main__":
    main()
