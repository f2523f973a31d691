"""Base CLI utilities and common functionality."""
from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

# Global console instance
console = Console()

# Common CLI app instance
app = typer.Typer(help="learnspring command line interface")


def create_table(title: str, columns: list[str]) -> Table:
    """Create a rich table with standard formatting."""
    table = Table(title=title)
    for column in columns:
        table.add_column(column)
    return table
