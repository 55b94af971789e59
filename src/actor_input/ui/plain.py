"""
plain.py

PURPOSE: Plain text output formatting for the CLI.
DEPENDENCIES: rich

ARCHITECTURE NOTES:
This module provides formatted console output using Rich.
It handles:
- Messages, successes and errors (errors go to stderr)
- Raw lines that must not be interpreted as markup (scenario output)
- Debug output
- The interactive prompt
"""

import json

from rich.console import Console
from rich.markup import escape

# Global console instances
console = Console()
error_console = Console(stderr=True)


def print_message(text: str) -> None:
    """Print a normal message. Brackets in the text are shown, not parsed as markup."""
    console.print(escape(text))


def print_raw(text: str) -> None:
    """Print a line verbatim: no markup, no highlighting, no wrapping."""
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def print_error(text: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]{escape(text)}[/red]", highlight=False, soft_wrap=True)


def print_success(text: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(text)}[/green]")


def print_prompt(prompt: str = "> ") -> str:
    """Print the input prompt and get user input."""
    return console.input(f"[bold cyan]{escape(prompt)}[/bold cyan]")


def print_debug(data: dict[str, object] | str) -> None:
    """Print debug information."""
    console.print("[dim]--- DEBUG ---[/dim]")
    if isinstance(data, dict):
        console.print(f"[dim]{escape(json.dumps(data, indent=2, default=str))}[/dim]")
    else:
        console.print(f"[dim]{escape(data)}[/dim]")
    console.print("[dim]-------------[/dim]")
