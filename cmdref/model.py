"""Command record and its JSON representation."""
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Iterable, List

from .errors import ParseError

CommandMap = Dict[str, "Command"]


@dataclass(frozen=True)
class Command:
    """A named shell-command snippet."""

    name: str
    command: str
    platform: str = ""
    description: str = ""

    def __str__(self) -> str:
        return (
            f"Name: {self.name}\n"
            f"Description: {self.description}\n"
            f"Platform: {self.platform}\n"
            f"Command:\n{self.command}\n"
        )

    @property
    def label(self) -> str:
        """Display label used when browsing: ``"{platform} - {name}"``."""
        return f"{self.platform} - {self.name}"

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Any) -> "Command":
        """Build a Command from a decoded JSON object.

        Unknown keys are ignored; missing keys and nulls become "".
        """
        if not isinstance(data, dict):
            raise ParseError(f"expected a command object, got {type(data).__name__}")
        values: Dict[str, str] = {}
        for f in fields(cls):
            value = data.get(f.name)
            if value is None:
                value = ""
            if not isinstance(value, str):
                raise ParseError(
                    f"field '{f.name}' must be a string, got {type(value).__name__}"
                )
            values[f.name] = value
        return cls(**values)


def parse_commands(text: str, source: str = "<string>") -> List[Command]:
    """Decode a JSON array of command objects.

    Blank text and a top-level ``null`` decode to an empty list.
    """
    if not text.strip():
        return []
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(
            f"{source} is not valid JSON: {exc}",
            hint="Fix or remove the file; it must hold a JSON list of commands",
        ) from exc
    if data is None:
        return []
    if not isinstance(data, list):
        raise ParseError(f"{source} must contain a JSON list, got {type(data).__name__}")
    commands: List[Command] = []
    for idx, item in enumerate(data):
        try:
            commands.append(Command.from_dict(item))
        except ParseError as exc:
            raise ParseError(f"{source}: entry {idx}: {exc.message}") from exc
    return commands


def dump_commands(commands: Iterable[Command], indent: int = 2) -> str:
    payload = [cmd.to_dict() for cmd in commands]
    return json.dumps(payload, indent=indent, ensure_ascii=False) + "\n"


def commands_to_map(commands: Iterable[Command]) -> CommandMap:
    """Key commands by name; a later duplicate replaces an earlier one."""
    cmd_map: CommandMap = {}
    for cmd in commands:
        cmd_map[cmd.name] = cmd
    return cmd_map


def map_to_commands(cmd_map: CommandMap) -> List[Command]:
    return [cmd_map[name] for name in sorted(cmd_map)]
