"""Dispatch a selected action to its handler and persist the result."""
from __future__ import annotations

import logging

from .actions import Action
from .context import SessionContext
from .errors import UnrecognizedActionError
from .handlers import (
    create_handler,
    delete_handler,
    import_handler,
    update_handler,
    view_handler,
)
from .model import CommandMap, commands_to_map, map_to_commands
from .store import CommandFileOps

LOG = logging.getLogger(__name__)


def load_commands(file_ops: CommandFileOps) -> CommandMap:
    """Read the store into a name-keyed mapping."""
    return commands_to_map(file_ops.load())


def update_file(cmd_map: CommandMap, file_ops: CommandFileOps) -> None:
    """Rewrite the whole store from ``cmd_map``."""
    file_ops.save(map_to_commands(cmd_map))


def process_action(cmd_map: CommandMap, action: Action, ctx: SessionContext) -> CommandMap:
    """Run one action and return the mapping the session continues with.

    Every action except View saves the full mapping afterwards. Errors from
    the handler or the save propagate; nothing is saved after a handler error.
    """
    LOG.debug("Processing action %s on %d commands", getattr(action, "value", action), len(cmd_map))
    if action is Action.VIEW:
        view_handler(cmd_map, ctx)
        return cmd_map

    if action is Action.CREATE:
        new_map = create_handler(cmd_map, ctx)
    elif action is Action.UPDATE:
        new_map = update_handler(cmd_map, ctx)
    elif action is Action.REMOVE:
        new_map = delete_handler(cmd_map, ctx)
    elif action is Action.IMPORT:
        path = ctx.prompter.text("Enter the absolute file path for the commands you want to import")
        merge = ctx.prompter.confirm("Do you want to merge the new commands with existing commands?")
        new_map = import_handler(path, merge, cmd_map, ctx)
    else:
        raise UnrecognizedActionError(f"unrecognized action {action!r}")

    update_file(new_map, ctx.file_ops)
    return new_map
