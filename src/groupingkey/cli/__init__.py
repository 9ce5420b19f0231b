"""CLI module for groupingkey.

Computes and explains grouping keys for JSON event batches.
"""

import typer
from rich.console import Console

from groupingkey.cli.commands import compute_keys, explain_terms

app = typer.Typer(
    name="groupingkey",
    help="groupingkey - Error grouping-key calculator",
    add_completion=False,
)
console = Console()


@app.command()
def compute(
    source: str = typer.Argument(..., help="JSON file with events, or '-' for stdin"),
    algorithm: str = typer.Option(
        None, "--algorithm", "-a", help="Checksum algorithm (md5, sha256, identity, ...)"
    ),
) -> None:
    """Compute grouping keys for a batch of events."""
    compute_keys(source, algorithm=algorithm, console=console)


@app.command()
def explain(
    source: str = typer.Argument(..., help="JSON file with events, or '-' for stdin"),
) -> None:
    """Show which grouping terms are hashed for each event."""
    explain_terms(source, console=console)


if __name__ == "__main__":
    app()
