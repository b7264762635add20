"""Terminal output helpers shared by every command."""
from typing import List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.text import Text

console = Console(highlight=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, soft_wrap=True)

LEO_ART = r"""
 _
| |    ___  ___
| |   / _ \/ _ \
| |__|  __/ (_) |
|_____\___|\___/
"""

CLI_ART = r"""
  ____ _     ___
 / ___| |   |_ _|
| |   | |    | |
| |___| |___ | |
 \____|_____|___|
"""

ORANGE = (255, 165, 0)
YELLOW = (255, 255, 0)
BLUE = (0, 0, 255)
PURPLE = (128, 0, 128)


def success(message: str) -> None:
    console.print(f"[green]✅ {escape(message)}[/green]")


def info(message: str) -> None:
    console.print(f"[blue]{escape(message)}[/blue]")


def warn(message: str) -> None:
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def error(message: str) -> None:
    err_console.print(f"[red]❌ {escape(message)}[/red]")


def _gradient(line: str, start: Tuple[int, int, int], end: Tuple[int, int, int]) -> Text:
    text = Text()
    steps = max(len(line) - 1, 1)
    for i, ch in enumerate(line):
        r, g, b = (round(s + (e - s) * i / steps) for s, e in zip(start, end))
        text.append(ch, style=f"#{r:02x}{g:02x}{b:02x}")
    return text


def banner_lines() -> List[Text]:
    """The "Leo CLI" banner, one styled Text per row."""
    leo = LEO_ART.strip("\n").split("\n")
    cli = CLI_ART.strip("\n").split("\n")
    width = max(len(line) for line in leo)
    rows: List[Text] = []
    for index, line in enumerate(leo):
        row = _gradient(line.ljust(width), ORANGE, YELLOW)
        row.append_text(_gradient(cli[index] if index < len(cli) else "", BLUE, PURPLE))
        rows.append(row)
    return rows


def show_banner() -> None:
    for row in banner_lines():
        console.print(row)
