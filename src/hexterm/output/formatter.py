"""Plain-text layout helpers."""

from collections.abc import Mapping, Sequence
from typing import Any

INVALID_TABLE_MESSAGE = "Invalid table data."


def _is_table_data(rows: Any) -> bool:
    if not isinstance(rows, Sequence) or isinstance(rows, (str, bytes)):
        return False
    if len(rows) == 0:
        return False
    return all(isinstance(row, Mapping) for row in rows)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def format_table(rows: Any) -> str:
    """Format a sequence of mappings as a simple text table.

    Columns come from the first row's keys. Keys missing from a later row
    render as empty cells and keys the first row lacks are ignored. Anything
    that is not a non-empty sequence of mappings yields
    ``INVALID_TABLE_MESSAGE`` instead of a table.
    """
    if not _is_table_data(rows):
        return INVALID_TABLE_MESSAGE

    headers = [str(key) for key in rows[0]]
    keys = list(rows[0])
    body = [[_cell(row.get(key)) for key in keys] for row in rows]

    # Calculate column widths
    widths = [len(h) for h in headers]
    for cells in body:
        for i, cell in enumerate(cells):
            widths[i] = max(widths[i], len(cell))

    def render(cells: list[str]) -> str:
        return " | ".join(cell.ljust(widths[i]) for i, cell in enumerate(cells))

    lines = [render(headers)]
    lines.append("-+-".join("-" * width for width in widths))
    for cells in body:
        lines.append(render(cells))

    return "\n".join(lines)
