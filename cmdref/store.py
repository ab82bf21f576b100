"""File operations for the commands store.

``CommandFileOps`` is the capability set the rest of the app consumes; the
live implementation works against the JSON file under the user's config dir.
"""
from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import List, Protocol

from .config import CmdrefConfig, ensure_app_dir
from .errors import ReadError, WriteError
from .model import Command, dump_commands, parse_commands

LOG = logging.getLogger(__name__)


class CommandFileOps(Protocol):
    def load(self) -> List[Command]:
        ...

    def load_external(self, path: str) -> List[Command]:
        ...

    def save(self, commands: List[Command]) -> None:
        ...

    def get_file_path(self) -> str:
        ...

    def read_raw(self) -> str:
        ...


def _read_text(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ReadError(f"File not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ReadError(f"Cannot read {path}: {exc}") from exc


class LiveCommandFileOps:
    """Reads and writes the store file on disk."""

    def __init__(self, config: CmdrefConfig) -> None:
        self.config = config
        ensure_app_dir(config)

    @property
    def path(self) -> Path:
        return self.config.store_path

    def get_file_path(self) -> str:
        return str(self.path.resolve())

    def load(self) -> List[Command]:
        # An absent store is an empty collection, not an error.
        if not self.path.exists():
            LOG.debug("No store file at %s yet", self.path)
            return []
        commands = parse_commands(_read_text(self.path), source=str(self.path))
        LOG.debug("Loaded %d commands from %s", len(commands), self.path)
        return commands

    def load_external(self, path: str) -> List[Command]:
        source = Path(path).expanduser()
        commands = parse_commands(_read_text(source), source=str(source))
        LOG.debug("Loaded %d commands from %s", len(commands), source)
        return commands

    def save(self, commands: List[Command]) -> None:
        text = dump_commands(commands, indent=self.config.json_indent)
        target = self.path
        tmp_name = None
        try:
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=str(target.parent), prefix=".cmdref-", suffix=".tmp", delete=False
            ) as handle:
                tmp_name = handle.name
                handle.write(text)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, target)
        except OSError as exc:
            if tmp_name and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise WriteError(f"Cannot write {target}: {exc}") from exc
        LOG.debug("Saved %d commands to %s", len(commands), target)

    def read_raw(self) -> str:
        return _read_text(self.path)
