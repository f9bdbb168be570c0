"""Convert hex color strings into 24-bit ANSI escape sequences."""

import os
import string
from typing import Mapping, NamedTuple, Optional

RESET = "\x1b[0m"

COLORTERM_VAR = "COLORTERM"
TRUE_COLOR_VALUES = ("truecolor", "24bit")

_HEX_DIGITS = frozenset(string.hexdigits)


class InvalidColorFormat(ValueError):
    """Raised when a string is not a 6-digit hex color."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid hex color: {value!r}")


class RGBTriple(NamedTuple):
    red: int
    green: int
    blue: int


def parse_hex(value: str) -> RGBTriple:
    """Parse ``RRGGBB`` or ``#RRGGBB`` into an RGB triple.

    Raises:
        InvalidColorFormat: if the digits after an optional ``#`` are not
            exactly six hexadecimal characters.
    """
    if not isinstance(value, str):
        raise InvalidColorFormat(value)

    digits = value[1:] if value.startswith("#") else value
    if len(digits) != 6 or not _HEX_DIGITS.issuperset(digits):
        raise InvalidColorFormat(value)

    return RGBTriple(
        int(digits[0:2], 16),
        int(digits[2:4], 16),
        int(digits[4:6], 16),
    )


def foreground(value: str) -> str:
    """Escape sequence setting the foreground color."""
    red, green, blue = parse_hex(value)
    return f"\x1b[38;2;{red};{green};{blue}m"


def background(value: str) -> str:
    """Escape sequence setting the background color."""
    red, green, blue = parse_hex(value)
    return f"\x1b[48;2;{red};{green};{blue}m"


def reset() -> str:
    """Escape sequence resetting all attributes."""
    return RESET


def supports_true_color(environ: Optional[Mapping[str, str]] = None) -> bool:
    """Check whether COLORTERM advertises 24-bit color.

    Only ``truecolor`` and ``24bit`` count, compared case-sensitively. The
    result is advisory; nothing here refuses to build sequences when it is
    False.
    """
    if environ is None:
        environ = os.environ
    return environ.get(COLORTERM_VAR) in TRUE_COLOR_VALUES
