"""The actions offered by the interactive menu."""
from __future__ import annotations

from enum import Enum
from typing import List

from .errors import UnrecognizedActionError
from .prompts import Prompter


class Action(str, Enum):
    CREATE = "Create"
    UPDATE = "Update"
    REMOVE = "Remove"
    VIEW = "View"
    IMPORT = "Import"
    EXIT = "Exit"


ACTIONS: List[str] = [action.value for action in Action]


def to_action(value: str) -> Action:
    try:
        return Action(value)
    except ValueError:
        raise UnrecognizedActionError(f"unrecognized action {value!r}") from None


def get_selected_action(prompter: Prompter) -> Action:
    """Ask the user for the next action."""
    return to_action(prompter.select("Select action", ACTIONS))
