"""Shared YAML helpers for settings files."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .cli_errors import ConfigError

__all__ = ["load_config"]

Pathish = Union[str, Path]


def load_config(path: Optional[Pathish]) -> Dict[str, Any]:
    """Load a YAML mapping; returns {} if the path is unset, missing or empty.

    Raises ConfigError when the file is not valid YAML or its root is not a mapping.
    """
    if not path:
        return {}
    p = Path(path)
    if not p.exists():
        return {}
    text = p.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {p}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Top-level YAML in {p} must be a mapping")
    return data
