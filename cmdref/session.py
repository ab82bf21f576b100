"""The interactive menu loop."""
from __future__ import annotations

import logging

from rich.markup import escape

from core.cli_errors import ExitCode

from .actions import Action, get_selected_action
from .context import SessionContext
from .dispatcher import load_commands, process_action
from .errors import ParseError, ReadError

LOG = logging.getLogger(__name__)


def run_session(ctx: SessionContext) -> int:
    """Ask for actions until the user picks Exit.

    A file that cannot be read or parsed during an action (typically a bad
    import path) is reported and the session carries on with the mapping it
    had. Any other error ends the session.
    """
    cmd_map = load_commands(ctx.file_ops)
    LOG.debug("Session started with %d commands", len(cmd_map))
    while True:
        action = get_selected_action(ctx.prompter)
        if action is Action.EXIT:
            return ExitCode.SUCCESS
        try:
            cmd_map = process_action(cmd_map, action, ctx)
        except (ReadError, ParseError) as exc:
            ctx.console.print(f"[red]Error:[/red] {escape(exc.message)}", highlight=False)
            if exc.hint:
                ctx.console.print(f"Hint: {escape(exc.hint)}", highlight=False)
