"""Handlers for the interactive actions.

Each handler takes the current name-keyed mapping and returns a new one; the
mapping it was given is never modified, so a failure part-way through an
action leaves the caller's state as it was.
"""
from __future__ import annotations

from typing import Iterable, Tuple

from rich.console import Console
from rich.text import Text

from .config import CmdrefConfig
from .context import SessionContext
from .model import Command, CommandMap, commands_to_map
from .prompts import Prompter


def render_command(console: Console, cmd: Command, config: CmdrefConfig) -> None:
    """Print a record with its platform and command body highlighted."""
    record = Text()
    record.append(f"Name: {cmd.name}\n")
    record.append(f"Description: {cmd.description}\n")
    record.append("Platform: ")
    record.append(cmd.platform, style=config.platform_style)
    record.append("\nCommand:\n")
    record.append(cmd.command, style=config.highlight_style)
    console.print(record, highlight=False)
    console.print()


def prompt_command(prompter: Prompter, name: str) -> Command:
    """Ask for the body, platform, and description of the command ``name``."""
    command = prompter.text("Command")
    platform = prompter.text("Platform")
    description = prompter.text("Description", required=False)
    return Command(name=name, command=command, platform=platform, description=description)


def create_handler(cmd_map: CommandMap, ctx: SessionContext) -> CommandMap:
    name = ctx.prompter.text("Command name")
    cmd = prompt_command(ctx.prompter, name)
    new_map = dict(cmd_map)
    new_map[cmd.name] = cmd
    return new_map


def view_handler(cmd_map: CommandMap, ctx: SessionContext) -> None:
    if not cmd_map:
        ctx.console.print("No existing commands.")
        return
    by_label = {cmd.label: cmd for cmd in cmd_map.values()}
    selected = ctx.prompter.select("Select a command", sorted(by_label))
    render_command(ctx.console, by_label[selected], ctx.config)


def update_handler(cmd_map: CommandMap, ctx: SessionContext) -> CommandMap:
    if not cmd_map:
        ctx.console.print("No existing commands.")
        return dict(cmd_map)
    selected = ctx.prompter.select("Select a command to update", sorted(cmd_map))
    render_command(ctx.console, cmd_map[selected], ctx.config)
    cmd = prompt_command(ctx.prompter, selected)
    new_map = dict(cmd_map)
    new_map[selected] = cmd
    return new_map


def delete_handler(cmd_map: CommandMap, ctx: SessionContext) -> CommandMap:
    new_map = dict(cmd_map)
    if not cmd_map:
        ctx.console.print("No commands to delete.")
        return new_map
    selected = ctx.prompter.select("Select command to delete", sorted(cmd_map))
    render_command(ctx.console, cmd_map[selected], ctx.config)
    if ctx.prompter.confirm(f"Are you sure you want to delete '{selected}'?"):
        del new_map[selected]
    return new_map


def import_commands(cmd_map: CommandMap, commands: Iterable[Command], merge: bool) -> CommandMap:
    """Merge ``commands`` into a copy of ``cmd_map``, or replace it outright.

    Either way a name that appears more than once keeps its last occurrence.
    """
    if not merge:
        return commands_to_map(commands)
    new_map = dict(cmd_map)
    new_map.update(commands_to_map(commands))
    return new_map


def import_handler(path: str, merge: bool, cmd_map: CommandMap, ctx: SessionContext) -> CommandMap:
    commands = ctx.file_ops.load_external(path)
    return import_commands(cmd_map, commands, merge)


def import_summary(before: CommandMap, after: CommandMap) -> Tuple[int, int, int]:
    """Return (added, replaced, removed) counts between two mappings."""
    added = sum(1 for name in after if name not in before)
    replaced = sum(1 for name in after if name in before and after[name] != before[name])
    removed = sum(1 for name in before if name not in after)
    return added, replaced, removed
