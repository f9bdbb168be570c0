"""Colored line writers for standard output.

Every writer emits one newline-terminated string with a single ``write``.
``error``, ``warning`` and ``info`` leave the color active after the line;
``custom_color`` always resets.
"""

import sys
from typing import Any, Optional, TextIO

from hexterm.colors.codec import RESET, background, foreground
from hexterm.output.formatter import format_table

ERROR_COLOR = "ff0000"
WARNING_COLOR = "ffff00"
INFO_COLOR = "008000"


def _write(text: str, stream: Optional[TextIO]) -> None:
    if stream is None:
        stream = sys.stdout
    stream.write(f"{text}\n")


def error(message: Any, stream: Optional[TextIO] = None) -> None:
    """Write a message in red."""
    _write(f"{foreground(ERROR_COLOR)}{message}", stream)


def warning(message: Any, stream: Optional[TextIO] = None) -> None:
    """Write a message in yellow."""
    _write(f"{foreground(WARNING_COLOR)}{message}", stream)


def info(message: Any, stream: Optional[TextIO] = None) -> None:
    """Write a message in green."""
    _write(f"{foreground(INFO_COLOR)}{message}", stream)


def debug(message: Any, stream: Optional[TextIO] = None) -> None:
    """Write a message without any styling."""
    _write(f"{message}", stream)


def custom_color(
    text_color: str,
    message: Any,
    bg_color: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """Write a message in a hex foreground color, with an optional background.

    Colors are validated before anything is written, so a bad ``bg_color``
    raises ``InvalidColorFormat`` without partial output.
    """
    out = foreground(text_color)
    if bg_color:
        out += background(bg_color)
    out += f"{message}{RESET}"
    _write(out, stream)


def table(rows: Any, stream: Optional[TextIO] = None) -> None:
    """Write rows of mappings as an aligned text table."""
    _write(format_table(rows), stream)


LEVEL_WRITERS = {
    "error": error,
    "warning": warning,
    "info": info,
    "debug": debug,
}
