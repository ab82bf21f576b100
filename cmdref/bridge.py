"""Read-only accessor exposed to a desktop frontend."""
from __future__ import annotations

import logging
from typing import Any, Optional

from .store import CommandFileOps

LOG = logging.getLogger(__name__)


class App:
    """Object whose public methods a desktop shell binds for its frontend."""

    def __init__(self, file_ops: CommandFileOps) -> None:
        self.file_ops = file_ops
        self.ctx: Optional[Any] = None

    def startup(self, ctx: Any) -> None:
        """Called by the shell when the app starts; keeps its runtime context."""
        self.ctx = ctx

    def get_commands(self) -> str:
        """Return the store file's raw JSON text."""
        try:
            return self.file_ops.read_raw()
        except Exception as exc:
            LOG.error("Error reading file: %s", exc)
            raise
