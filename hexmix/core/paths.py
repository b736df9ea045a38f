from __future__ import annotations

import os
import sys
from pathlib import Path


APP_NAME = "hexmix"
CONFIG_ENV = "HEXMIX_CONFIG_DIR"


def config_dir() -> Path:
    override = os.environ.get(CONFIG_ENV)
    if override:
        return Path(override)
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or os.environ.get("LOCALAPPDATA")
        return Path(appdata or Path.home()) / APP_NAME
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg or Path.home() / ".config") / APP_NAME


def config_path() -> Path:
    return config_dir() / "config.json"
