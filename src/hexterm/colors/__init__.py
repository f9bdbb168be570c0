"""Hex color to ANSI escape sequence conversion."""

from .codec import (
    RESET,
    InvalidColorFormat,
    RGBTriple,
    background,
    foreground,
    parse_hex,
    reset,
    supports_true_color
)

__all__ = [
    "RESET",
    "InvalidColorFormat",
    "RGBTriple",
    "background",
    "foreground",
    "parse_hex",
    "reset",
    "supports_true_color"
]
