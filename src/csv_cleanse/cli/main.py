"""Main CLI entry point for csv-cleanse.

The application has a single command, so it is invoked directly:

    csv-cleanse [FILE] [--delimiter D] [--output PATH]
"""

from __future__ import annotations

try:
    import typer
except ImportError as e:
    raise ImportError("CLI dependencies not installed. Install with: pip install csv-cleanse[cli]") from e

from csv_cleanse.cli.cleanse import cleanse

app = typer.Typer(
    name="csv-cleanse",
    help="Clean up delimited data for strict downstream tools.",
    add_completion=False,
)

app.command()(cleanse)


if __name__ == "__main__":
    app()
