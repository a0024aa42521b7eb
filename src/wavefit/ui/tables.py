"""UI tables for displaying fit result schemas and rows."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich import box
from rich.table import Table

from .console import console

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from wavefit.storage.columns import ColumnSpec

__all__ = [
    "create_table",
    "print_records",
    "print_schema",
    "print_summary",
]


def create_table(title: str | None = None, show_header: bool = True) -> Table:
    """Create a standard table with consistent styling."""
    return Table(
        title=title,
        title_style="header" if title else None,
        box=box.ROUNDED,
        show_header=show_header,
        header_style="bold cyan",
        border_style="dim",
    )


def print_summary(items: dict[str, Any], title: str = "Summary") -> None:
    """Print a standard two-column summary table.

    Args:
        items: Dictionary of key-value pairs to display
        title: Table title
    """
    table = create_table(title, show_header=False)
    table.add_column("Item", style="metric")
    table.add_column("Value", style="value")

    for key, value in items.items():
        table.add_row(key, str(value))

    console.print(table)


def print_schema(columns: Sequence[ColumnSpec], title: str = "Fit result columns") -> None:
    """Print one line per column: position, name, type code and meaning."""
    table = create_table(title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Column", style="key")
    table.add_column("Type", justify="center")
    table.add_column("Description")

    for pos, column in enumerate(columns):
        table.add_row(str(pos), column.name, column.type_code.value, column.description)

    console.print(table)


def _format_value(value: Any) -> str:
    if isinstance(value, float):
        return f"{value:.6g}"
    return str(value)


def print_records(
    column_names: Sequence[str],
    rows: Iterable[dict[str, Any]],
    title: str | None = None,
) -> None:
    """Print rows (mappings keyed by column name) as a table."""
    table = create_table(title)
    for name in column_names:
        table.add_column(name, justify="right")

    for row in rows:
        table.add_row(*(_format_value(row[name]) for name in column_names))

    console.print(table)
