"""Collaborators shared by one interactive session."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from rich.console import Console

from .config import CmdrefConfig
from .prompts import Prompter, RichPrompter
from .store import CommandFileOps, LiveCommandFileOps


@dataclass
class SessionContext:
    config: CmdrefConfig
    file_ops: CommandFileOps
    prompter: Prompter
    console: Console = field(default_factory=Console)

    @classmethod
    def from_config(cls, config: CmdrefConfig, console: Optional[Console] = None) -> "SessionContext":
        """Wire the live store and rich prompts for ``config``."""
        console = console or Console()
        return cls(
            config=config,
            file_ops=LiveCommandFileOps(config),
            prompter=RichPrompter(console),
            console=console,
        )
