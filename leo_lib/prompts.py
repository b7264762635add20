"""Interactive questions, asked one at a time."""
from typing import List, Optional

from rich.prompt import Confirm, Prompt

from .console import console


class Prompter:
    """Asks input, list and confirm questions on the terminal.

    Commands take a prompter argument so tests can pass scripted answers instead.
    """

    def text(self, message: str) -> str:
        return Prompt.ask(message, console=console)

    def select(self, message: str, choices: List[str], default: Optional[str] = None) -> str:
        for index, choice in enumerate(choices, start=1):
            console.print(f"  [cyan]{index}[/cyan]) {choice}")
        numbers = [str(i) for i in range(1, len(choices) + 1)]
        default_number = str(choices.index(default) + 1) if default in choices else None
        if default_number is None:
            picked = Prompt.ask(message, choices=numbers, console=console)
        else:
            picked = Prompt.ask(message, choices=numbers, default=default_number, console=console)
        return choices[int(picked) - 1]

    def confirm(self, message: str, default: bool = True) -> bool:
        return Confirm.ask(message, default=default, console=console)
