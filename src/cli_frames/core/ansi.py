"""ANSI escape-sequence builders and printing-width helpers.

Every function here returns a string; nothing is written to a stream.
"""

from __future__ import annotations

import re
import unicodedata

from cli_frames.core.models import ESC

_ANSI_RE = re.compile(r"\x1b\[[0-9;?]*[A-Za-z]")

# Variation selectors and joiners occupy no column of their own.
_ZERO_WIDTH = frozenset({0x200B, 0x200C, 0x200D, 0xFE0E, 0xFE0F})


def control(args: str, cmd: str) -> str:
    """Build a CSI sequence: ``ESC [ args cmd``."""
    return f"{ESC}[{args}{cmd}"


def sgr(params: str) -> str:
    """Select Graphic Rendition, e.g. ``sgr("32")`` for green."""
    return control(params, "m")


def hide_cursor() -> str:
    return control("?25", "l")


def show_cursor() -> str:
    return control("?25", "h")


def cursor_horizontal_absolute(n: int = 1) -> str:
    """Move the cursor to 1-based column *n* of the current line."""
    if n < 1:
        raise ValueError(f"column must be >= 1, got {n}")
    return control(str(n), "G")


def strip_codes(text: str) -> str:
    """Remove all CSI escape sequences from *text*."""
    return _ANSI_RE.sub("", text)


def printing_width(text: str) -> int:
    """Return the number of terminal columns *text* occupies.

    Escape sequences are ignored, East Asian wide/fullwidth characters
    count as two columns, combining marks and variation selectors as
    zero.
    """
    width = 0
    for ch in strip_codes(text):
        if ord(ch) in _ZERO_WIDTH or unicodedata.combining(ch):
            continue
        width += 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
    return width
