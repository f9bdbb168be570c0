"""hexterm: true-color terminal output helpers."""

__version__ = "0.1.0"

from hexterm.colors import InvalidColorFormat, RGBTriple, parse_hex, foreground, background, reset
from hexterm.output import error, warning, info, debug, custom_color, table

__all__ = [
    "InvalidColorFormat",
    "RGBTriple",
    "parse_hex",
    "foreground",
    "background",
    "reset",
    "error",
    "warning",
    "info",
    "debug",
    "custom_color",
    "table",
]
