"""Shared utility functions for designprompt.

Provides JSON loading and the Rich-based output helpers used by the
command-line caller: status messages, toast-style notifications, key/value
summary tables and syntax-highlighted document display.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table
from rich.text import Text

console = Console()


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.

    Returns:
        Parsed dictionary.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top level is not a JSON object.
    """
    file_path = Path(path)
    raw = file_path.read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {file_path}, got {type(data).__name__}")
    return data


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(Text(key), Text(str(value)))

    console.print(table)
    console.print()


def print_options_table(options: dict[str, tuple[str, ...]], defaults: dict[str, Any]) -> None:
    """Print every axis with its offered values, highlighting the default."""
    table = Table(title="Available Options", show_header=True, header_style="bold cyan")
    table.add_column("Option", style="dim", no_wrap=True)
    table.add_column("Values")

    for name, values in options.items():
        default = str(defaults.get(name, ""))
        rendered = [
            f"[bold green]{value}[/bold green]" if value == default else value
            for value in values
        ]
        table.add_row(name.replace("_", "-"), ", ".join(rendered))

    console.print(table)
    console.print()


def print_prompt(prompt_text: str) -> None:
    """Print the design prompt inside a panel."""
    console.print(Panel(Text(prompt_text), title="Prompt", border_style="cyan", expand=True))


def print_code(document_text: str, theme: str = "monokai", line_numbers: bool = False) -> None:
    """Print the starter document with HTML syntax highlighting."""
    console.print(
        Panel(
            Syntax(document_text, "html", theme=theme, line_numbers=line_numbers),
            title="Code",
            border_style="magenta",
        )
    )


def notify(message: str, style: str = "green") -> None:
    """Show a short transient-style notification."""
    console.print(Panel(Text(message), border_style=style, expand=False))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(Text(message, style="bold green"))


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(Text(message, style="bold red"))
