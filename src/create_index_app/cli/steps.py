"""User-facing progress lines for the scaffold flow.

Pure rendering helpers — they format text and hand it to the shared
console proxy, which falls back to plain stderr output without Rich.
"""

from __future__ import annotations

from pathlib import Path

from create_index_app.cli.console import console, escape
from create_index_app.utils.constants import HOMEPAGE_URL

_LOGO: tuple[str, ...] = (
    "            |",
    "          |||||",
    "        |||||||||",
    "       |||||||||||",
    "      |||||||||||||        Thank you for using Leaf! Please",
    f"      |||||||||||||        visit [underline]{HOMEPAGE_URL}[/underline]",
    "       |||||||||||",
    "        |||||||||",
    "          |||||",
)


def print_intro() -> None:
    console.print()
    console.print("[green]" + "\n".join(_LOGO) + "[/green]")
    console.print()


def print_step(line: str, subline: str | None = None) -> None:
    """Print a highlighted step header, optionally with a dim note."""
    text = f"[bold reverse green] {line} [/bold reverse green]"
    if subline:
        text += f"[dim green]  {subline}[/dim green]"
    console.print(text)


def print_summary(template: str, target: Path) -> None:
    console.print()
    console.print(f"[bold green]Template:[/bold green] [green]{escape(template)}[/green]")
    console.print(f"[bold green]Target directory:[/bold green] [green]{escape(target)}[/green]")
    console.print()


def print_done(target: Path) -> None:
    console.print()
    print_step(f'Leaf is setup! Go to "{escape(target)}" to see your project')
