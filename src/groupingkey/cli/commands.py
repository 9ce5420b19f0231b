"""Implementation of the groupingkey CLI commands.

Both commands read a JSON document holding either a list of events or an
object with an ``events`` list.
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer
from pydantic import TypeAdapter, ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from groupingkey.hashing.config import load_config
from groupingkey.hashing.factory import create_hasher_factory
from groupingkey.model.events import Event
from groupingkey.processor.grouping import SetGroupingKey, grouping_terms

_EVENTS = TypeAdapter(list[Event])


def load_events(source: str) -> list[Event]:
    """Read and validate events from a JSON file, or stdin when *source* is ``-``.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the document is not valid JSON or not an event list.
        ValidationError: If an event does not match the model.
    """
    raw = sys.stdin.read() if source == "-" else Path(source).read_text()
    data: Any = json.loads(raw)
    if isinstance(data, dict):
        data = data.get("events")
    if not isinstance(data, list):
        raise ValueError("Expected a list of events or an object with 'events'")
    return _EVENTS.validate_python(data)


def _load_or_exit(source: str, console: Console) -> list[Event]:
    try:
        return load_events(source)
    except (OSError, ValidationError, ValueError) as e:
        console.print(f"[red]✗[/red] Could not load events from {source}: {e}")
        raise typer.Exit(code=1) from e


def compute_keys(
    source: str,
    algorithm: Optional[str] = None,
    console: Optional[Console] = None,
) -> list[str]:
    """Compute grouping keys for every event in *source* and print them.

    Args:
        source: Path to a JSON file, or ``-`` for stdin.
        algorithm: Checksum algorithm override.
        console: Rich console instance for output.

    Returns:
        Keys in event order; events without an error get an empty string.
    """
    if console is None:
        console = Console()

    events = _load_or_exit(source, console)

    try:
        config = load_config(algorithm=algorithm)
        processor = SetGroupingKey(create_hasher_factory(config), verbose=False)
    except (ValidationError, ValueError) as e:
        console.print(f"[red]✗[/red] Invalid hasher configuration: {e}")
        raise typer.Exit(code=1) from e

    processor.process_batch(events)

    table = Table(
        title=f"Grouping keys ({config.algorithm})",
        show_header=True,
        header_style="bold",
    )
    table.add_column("#", style="dim", justify="right")
    table.add_column("Grouping key", style="cyan")

    keys: list[str] = []
    for index, event in enumerate(events):
        if event.error is None:
            keys.append("")
            table.add_row(str(index), "[dim]no error[/dim]")
            continue
        key = event.error.grouping_key
        keys.append(key)
        table.add_row(str(index), key or "[dim]<empty>[/dim]")

    console.print(table)
    return keys


def explain_terms(
    source: str,
    console: Optional[Console] = None,
) -> list[list[str]]:
    """Print the grouping terms selected for every event in *source*.

    Args:
        source: Path to a JSON file, or ``-`` for stdin.
        console: Rich console instance for output.

    Returns:
        Terms per event, in event order.
    """
    if console is None:
        console = Console()

    events = _load_or_exit(source, console)

    table = Table(title="Grouping terms", show_header=True, header_style="bold")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Terms", style="green")

    all_terms: list[list[str]] = []
    for index, event in enumerate(events):
        terms = grouping_terms(event.error)
        all_terms.append(terms)
        if terms:
            table.add_row(str(index), escape(", ".join(repr(t) for t in terms)))
        else:
            table.add_row(str(index), "[dim]none[/dim]")

    console.print(table)
    return all_terms
