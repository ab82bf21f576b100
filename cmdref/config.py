"""Configuration: where the store lives and how records are displayed.

A ``CmdrefConfig`` is resolved once at startup and handed to everything that
needs a path, so nothing reads the environment behind the caller's back.
"""
from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from core.cli_errors import ConfigError
from core.yamlio import load_config

LOG = logging.getLogger(__name__)

APP_DIR_NAME = "cmdref"
STORE_FILE_NAME = "cmdref.json"
SETTINGS_FILE_NAME = "config.yaml"
CONFIG_HOME_ENV = "CMDREF_CONFIG_HOME"

DEFAULT_HIGHLIGHT_STYLE = "yellow"
DEFAULT_PLATFORM_STYLE = "bold cyan"
DEFAULT_JSON_INDENT = 2


def user_config_dir(env: Optional[Mapping[str, str]] = None, platform: Optional[str] = None) -> Path:
    """Return the per-user configuration root for this platform."""
    env = os.environ if env is None else env
    platform = platform or sys.platform
    if platform.startswith("win"):
        appdata = env.get("APPDATA")
        if appdata:
            return Path(appdata)
        return Path.home() / "AppData" / "Roaming"
    if platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = env.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


@dataclass(frozen=True)
class CmdrefConfig:
    base_dir: Path
    highlight_style: str = DEFAULT_HIGHLIGHT_STYLE
    platform_style: str = DEFAULT_PLATFORM_STYLE
    json_indent: int = DEFAULT_JSON_INDENT

    @property
    def app_dir(self) -> Path:
        return self.base_dir / APP_DIR_NAME

    @property
    def store_path(self) -> Path:
        return self.app_dir / STORE_FILE_NAME

    @property
    def settings_path(self) -> Path:
        return self.app_dir / SETTINGS_FILE_NAME


def _settings_overrides(data: Dict[str, Any], source: Path) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for key in ("highlight_style", "platform_style"):
        if key in data:
            value = data[key]
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"{source}: '{key}' must be a non-empty string")
            overrides[key] = value
    if "json_indent" in data:
        value = data["json_indent"]
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ConfigError(f"{source}: 'json_indent' must be a non-negative integer")
        overrides["json_indent"] = value
    return overrides


def resolve_config(
    config_dir: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
) -> CmdrefConfig:
    """Resolve the base directory and apply the optional YAML settings file.

    Precedence for the base directory: explicit ``config_dir``, the
    ``CMDREF_CONFIG_HOME`` environment variable, then the platform default.
    """
    env = os.environ if env is None else env
    if config_dir:
        base = Path(config_dir).expanduser()
    elif env.get(CONFIG_HOME_ENV):
        base = Path(env[CONFIG_HOME_ENV]).expanduser()
    else:
        base = user_config_dir(env)
    config = CmdrefConfig(base_dir=base)
    data = load_config(config.settings_path)
    if data:
        LOG.debug("Loaded settings from %s", config.settings_path)
        config = replace(config, **_settings_overrides(data, config.settings_path))
    return config


def ensure_app_dir(config: CmdrefConfig) -> Path:
    """Create the application directory if needed and return it."""
    try:
        config.app_dir.mkdir(mode=0o777, parents=True, exist_ok=True)
    except OSError as exc:
        raise ConfigError(
            f"Cannot create config directory {config.app_dir}: {exc.strerror or exc}",
            hint=f"Set {CONFIG_HOME_ENV} or pass --config-dir to use another location",
        ) from exc
    return config.app_dir
