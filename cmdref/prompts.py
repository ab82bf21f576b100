"""Interactive prompts: pick from a list, type a value, answer yes/no."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt

from .errors import PromptError


class Prompter(Protocol):
    def select(self, message: str, choices: Sequence[str]) -> str:
        ...

    def text(self, message: str, required: bool = True) -> str:
        ...

    def confirm(self, message: str) -> bool:
        ...


class RichPrompter:
    """Prompter backed by rich's Prompt and Confirm."""

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console or Console()

    def select(self, message: str, choices: Sequence[str]) -> str:
        if not choices:
            raise PromptError(f"{message}: nothing to choose from")
        self.console.print(f"[bold]{escape(message)}[/bold]")
        width = len(str(len(choices)))
        for idx, choice in enumerate(choices, start=1):
            self.console.print(f"  {idx:>{width}}) ", end="")
            self.console.print(choice, markup=False, highlight=False)
        numbers = [str(idx) for idx in range(1, len(choices) + 1)]
        try:
            answer = Prompt.ask("Number", choices=numbers, show_choices=False, console=self.console)
        except EOFError as exc:
            raise PromptError("Input closed while waiting for a selection") from exc
        return choices[int(answer) - 1]

    def text(self, message: str, required: bool = True) -> str:
        while True:
            try:
                answer = Prompt.ask(escape(message), default="", show_default=False, console=self.console)
            except EOFError as exc:
                raise PromptError(f"Input closed while waiting for '{message}'") from exc
            if answer.strip() or not required:
                return answer
            self.console.print("[red]A value is required.[/red]")

    def confirm(self, message: str) -> bool:
        try:
            return Confirm.ask(escape(message), console=self.console)
        except EOFError as exc:
            raise PromptError(f"Input closed while waiting for '{message}'") from exc
