import os
import json
from typing import List, Any, Optional
from rich.console import Console
from rich.table import Table
from rich.markup import escape

from config import settings

# Environment variable to control CLI output mode
# Allowed values: 'plain' (default), 'json', 'rich'
OUTPUT_MODE_ENV = "LIB_CLI_OUTPUT"
OUTPUT_MODES = {"plain", "json", "rich"}

_console = Console()

def set_output_mode(mode: Optional[str]) -> None:
    mode = (mode or "").lower().strip()
    if mode in OUTPUT_MODES:
        os.environ[OUTPUT_MODE_ENV] = mode
    # invalid values are ignored; the current mode stays

def get_output_mode() -> str:
    mode = os.environ.get(OUTPUT_MODE_ENV, settings.output_mode).lower()
    return mode if mode in OUTPUT_MODES else "plain"

def print_event(event: Any) -> None:
    """Print one operation outcome (a LibraryEvent).
    - plain: the event message
    - json: one JSON object
    - rich: green for confirmations, yellow for refusals
    """
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(event.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        style = "green" if event.ok else "yellow"
        _console.print(f"[{style}]{escape(event.message)}[/]")
    else:
        print(event.message)

def print_listing(header: str, books: List[Any]) -> None:
    """Print a header followed by one line per book.
    - plain: blank line, header, then each book's describe() output
    - json: {"listing": header, "books": [...]}
    - rich: Rich table
    """
    mode = get_output_mode()

    if mode == "json":
        payload = {"listing": header, "books": [b.to_dict() for b in books]}
        print(json.dumps(payload, ensure_ascii=False))
    elif mode == "rich":
        table = Table(title=header, show_lines=True, header_style="bold cyan")
        table.add_column("Type", style="magenta", no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Author", style="white")
        table.add_column("Details", style="white")
        for b in books:
            table.add_row(b.edition.label, b.title, b.author, b.edition.details())
        _console.print(table)
    else:
        print()
        print(header)
        for b in books:
            print(b.describe())

def print_fine(receipt: Any) -> None:
    """Print the fine reported by a return transaction."""
    mode = get_output_mode()

    if mode == "json":
        print(json.dumps(receipt.to_dict(), ensure_ascii=False))
    elif mode == "rich":
        _console.print(f"[bold]{escape(receipt.message)}[/]")
    else:
        print(receipt.message)
