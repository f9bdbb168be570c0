"""Output formatting package."""

from .console import (
    custom_color,
    debug,
    error,
    info,
    table,
    warning
)
from .formatter import INVALID_TABLE_MESSAGE, format_table

__all__ = [
    "INVALID_TABLE_MESSAGE",
    "custom_color",
    "debug",
    "error",
    "format_table",
    "info",
    "table",
    "warning"
]
