"""Pipelines behind the non-interactive commands (list, show, import)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.cli_errors import NotFoundError
from core.cli_output import OutputWriter
from core.pipeline import BaseProducer, SafeProcessor

from .dispatcher import load_commands, update_file
from .handlers import import_commands, import_summary
from .model import Command
from .store import CommandFileOps

LIST_HEADERS = ["platform", "name", "description", "command"]


@dataclass
class ListRequest:
    file_ops: CommandFileOps
    platform: Optional[str] = None


@dataclass
class ListResult:
    commands: List[Command]


class ListProcessor(SafeProcessor[ListRequest, ListResult]):
    def _process_safe(self, payload: ListRequest) -> ListResult:
        commands = list(load_commands(payload.file_ops).values())
        if payload.platform:
            wanted = payload.platform.lower()
            commands = [c for c in commands if c.platform.lower() == wanted]
        commands.sort(key=lambda c: c.label)
        return ListResult(commands=commands)


class ListProducer(BaseProducer):
    def __init__(self, writer: Optional[OutputWriter] = None) -> None:
        self.writer = writer or OutputWriter()

    def _produce_success(self, payload: ListResult, diagnostics: Optional[Dict[str, Any]]) -> None:
        if self.writer.is_text:
            if not payload.commands:
                self.writer.print("No existing commands.")
            for cmd in payload.commands:
                self.writer.print(cmd.label)
            return
        self.writer.print_data([c.to_dict() for c in payload.commands], headers=LIST_HEADERS)


@dataclass
class ShowRequest:
    file_ops: CommandFileOps
    name: str


class ShowProcessor(SafeProcessor[ShowRequest, Command]):
    def _process_safe(self, payload: ShowRequest) -> Command:
        cmd_map = load_commands(payload.file_ops)
        try:
            return cmd_map[payload.name]
        except KeyError:
            raise NotFoundError(
                f"No command named '{payload.name}'",
                hint="Run 'cmdref list' to see the stored names",
            ) from None


class ShowProducer(BaseProducer):
    def __init__(self, writer: Optional[OutputWriter] = None) -> None:
        self.writer = writer or OutputWriter()

    def _produce_success(self, payload: Command, diagnostics: Optional[Dict[str, Any]]) -> None:
        if self.writer.is_text:
            self.writer.print(str(payload), end="")
            return
        self.writer.print_data(payload.to_dict(), headers=LIST_HEADERS)


@dataclass
class ImportRequest:
    file_ops: CommandFileOps
    path: str
    merge: bool = True


@dataclass
class ImportResult:
    path: str
    merge: bool
    added: int
    replaced: int
    removed: int
    total: int


class ImportProcessor(SafeProcessor[ImportRequest, ImportResult]):
    def _process_safe(self, payload: ImportRequest) -> ImportResult:
        # Read the incoming file before touching the store.
        incoming = payload.file_ops.load_external(payload.path)
        before = load_commands(payload.file_ops)
        after = import_commands(before, incoming, payload.merge)
        update_file(after, payload.file_ops)
        added, replaced, removed = import_summary(before, after)
        return ImportResult(
            path=payload.path,
            merge=payload.merge,
            added=added,
            replaced=replaced,
            removed=removed,
            total=len(after),
        )


class ImportProducer(BaseProducer):
    def __init__(self, writer: Optional[OutputWriter] = None) -> None:
        self.writer = writer or OutputWriter()

    def _produce_success(self, payload: ImportResult, diagnostics: Optional[Dict[str, Any]]) -> None:
        if not self.writer.is_text:
            self.writer.print_data(payload)
            return
        mode = "Merged" if payload.merge else "Replaced store with"
        self.writer.print_success(
            f"{mode} {payload.path}: {payload.added} added, {payload.replaced} replaced, "
            f"{payload.removed} removed ({payload.total} total)"
        )
