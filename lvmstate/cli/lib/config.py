"""
Configuration loader for lvmstate.

Host-specific paths and defaults (fstab location, log level, mount options)
are read from an INI file instead of being hardcoded.
"""

from __future__ import annotations

import configparser
import logging
import os
from dataclasses import dataclass
from pathlib import Path


DEFAULT_CONFIG_PATH = Path("/etc/lvmstate/lvmstate.conf")

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class LvmStateConfig:
    fstab_path: Path = Path("/etc/fstab")
    log_level: str = "INFO"
    default_mount_options: str = "defaults"

    @property
    def log_level_number(self) -> int:
        return getattr(logging, self.log_level)


def _config_path() -> Path:
    env = os.environ.get("LVMSTATE_CONFIG_PATH")
    if env:
        return Path(env)
    return DEFAULT_CONFIG_PATH


def _read_ini(path: Path) -> configparser.ConfigParser:
    parser = configparser.ConfigParser()
    if path.exists():
        parser.read(path, encoding="utf-8")
    return parser


def load_config() -> LvmStateConfig:
    """
    Load config from `LVMSTATE_CONFIG_PATH` or `/etc/lvmstate/lvmstate.conf`.

    Missing files are not an error; defaults are returned.
    """
    parser = _read_ini(_config_path())
    section = parser["lvmstate"] if parser.has_section("lvmstate") else {}

    def _get(key: str, default: str) -> str:
        if isinstance(section, dict):
            return str(section.get(key, default)).strip()
        return str(section.get(key, fallback=default)).strip()

    log_level = _get("log_level", "INFO").upper()
    if log_level not in _LOG_LEVELS:
        log_level = "INFO"

    return LvmStateConfig(
        fstab_path=Path(_get("fstab_path", "/etc/fstab")),
        log_level=log_level,
        default_mount_options=_get("default_mount_options", "defaults") or "defaults",
    )
