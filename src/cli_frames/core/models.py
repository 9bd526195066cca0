"""Domain models for cli-frames.

All models are **frozen** dataclasses — immutable value objects with no
I/O and no dependencies on external packages.  Anything that depends on
the terminal (emoji support, cursor addressing) is passed in as a
:class:`TerminalCapabilities` snapshot rather than read from globals.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

ESC: str = "\x1b"


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Color:
    """A named SGR color/attribute."""

    name: str
    """Symbolic lower-case name (e.g. ``green``)."""

    sgr: str
    """SGR parameter string (e.g. ``"32"`` or ``"38;5;244"``)."""

    rich_style: str
    """Equivalent rich style, used when rendering ``{{name:text}}`` tags."""

    @property
    def code(self) -> str:
        """The ANSI escape sequence selecting this color."""
        return f"{ESC}[{self.sgr}m"


# ---------------------------------------------------------------------------
# Terminal capability snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TerminalCapabilities:
    """What the current terminal can do, captured at one point in time.

    ``capability_limited`` is true where ANSI colors work but cursor
    addressing does not (log-capturing CI).  ``supports_emoji`` selects
    between a glyph's codepoints and its plain fallback.
    """

    capability_limited: bool = False
    supports_emoji: bool = True

    INTERACTIVE: ClassVar[TerminalCapabilities]
    LIMITED: ClassVar[TerminalCapabilities]

    @property
    def interactive(self) -> bool:
        return not self.capability_limited


TerminalCapabilities.INTERACTIVE = TerminalCapabilities()
TerminalCapabilities.LIMITED = TerminalCapabilities(capability_limited=True)


# ---------------------------------------------------------------------------
# Glyphs
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Glyph:
    """A named, colorized symbol with a Unicode form and a plain fallback.

    The displayed text is never stored: every accessor takes the
    emoji-support flag so the same instance renders differently when
    the terminal capability changes between calls.
    """

    handle: str
    """Short unique key (e.g. ``"v"``)."""

    codepoints: tuple[int, ...]
    """One or more Unicode scalar values (base glyph + optional selector)."""

    plain: str
    """Fallback used when emoji are not supported."""

    color: Color
    """Shared color the glyph is drawn in."""

    @property
    def unicode(self) -> str:
        """The codepoint sequence decoded as text."""
        return "".join(chr(cp) for cp in self.codepoints)

    def char(self, emoji: bool) -> str:
        """Return the character(s) to display for the given emoji support."""
        return self.unicode if emoji else self.plain

    def to_s(self, emoji: bool, reset: str = f"{ESC}[0m") -> str:
        """Color escape + display character + reset escape."""
        return self.color.code + self.char(emoji) + reset

    def fmt(self, emoji: bool) -> str:
        """Color-tagged markup form, e.g. ``{{green:✓}}``."""
        return f"{{{{{self.color.name}:{self.char(emoji)}}}}}"
