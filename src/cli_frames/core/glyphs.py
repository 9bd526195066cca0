"""Glyph registry — named symbols with plain-text fallbacks.

A :class:`GlyphRegistry` is built once at startup (usually with
:func:`build_default_registry`) and passed by reference to whatever
renders glyphs.  It is append-only: handles can be registered but never
replaced or removed.

Display text is resolved late.  The module-level ``render_*`` functions
take an explicit :class:`~cli_frames.core.models.TerminalCapabilities`
snapshot, so a glyph prints its codepoints on an emoji-capable terminal
and its fallback everywhere else without caching either.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from cli_frames.core import colors as _colors
from cli_frames.core.models import Color, Glyph, TerminalCapabilities
from cli_frames.core.protocols import ColorResolver
from cli_frames.exceptions import DuplicateHandle, UnknownGlyphHandle

logger = logging.getLogger(__name__)


class GlyphRegistry:
    """Append-only handle → :class:`Glyph` table.

    Parameters
    ----------
    colors:
        Resolver used when :meth:`register` receives a color name.
        Defaults to the built-in :class:`~cli_frames.core.colors.ColorTable`.
    """

    def __init__(self, colors: ColorResolver | None = None) -> None:
        self._colors: ColorResolver = colors or _colors.ColorTable()
        self._glyphs: dict[str, Glyph] = {}

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def register(
        self,
        handle: str,
        codepoints: int | Sequence[int],
        plain: str,
        color: Color | str,
    ) -> Glyph:
        """Create a glyph and add it under *handle*.

        Raises
        ------
        DuplicateHandle
            If *handle* is already registered.
        UnknownColor
            If *color* cannot be resolved.
        """
        if handle in self._glyphs:
            raise DuplicateHandle(handle)
        if isinstance(codepoints, int):
            points: tuple[int, ...] = (codepoints,)
        else:
            points = tuple(codepoints)
        if not points:
            raise ValueError(f"glyph {handle!r} needs at least one codepoint")

        glyph = Glyph(
            handle=handle,
            codepoints=points,
            plain=plain,
            color=self._colors.resolve(color),
        )
        self._glyphs[handle] = glyph
        logger.debug("registered glyph %r (%s)", handle, glyph.color.name)
        return glyph

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def lookup(self, handle: object) -> Glyph:
        """Return the glyph registered under *handle*.

        Raises
        ------
        UnknownGlyphHandle
            If nothing is registered under *handle*; the message lists
            every available handle.
        """
        try:
            return self._glyphs[str(handle)]
        except KeyError:
            raise UnknownGlyphHandle(handle, self.handles) from None

    def available(self) -> frozenset[str]:
        """All registered handles."""
        return frozenset(self._glyphs)

    @property
    def handles(self) -> tuple[str, ...]:
        """Registered handles in registration order."""
        return tuple(self._glyphs)

    def __contains__(self, handle: object) -> bool:
        return handle in self._glyphs

    def __iter__(self) -> Iterator[Glyph]:
        return iter(self._glyphs.values())

    def __len__(self) -> int:
        return len(self._glyphs)


# ---------------------------------------------------------------------------
# Capability-aware rendering
# ---------------------------------------------------------------------------

def render_char(glyph: Glyph, capabilities: TerminalCapabilities) -> str:
    """Codepoints when emoji are supported, the plain fallback otherwise."""
    return glyph.char(capabilities.supports_emoji)


def render(glyph: Glyph, capabilities: TerminalCapabilities) -> str:
    """Color escape + display character + reset escape."""
    return glyph.to_s(capabilities.supports_emoji, reset=_colors.RESET.code)


def render_markup(glyph: Glyph, capabilities: TerminalCapabilities) -> str:
    """``{{color:char}}`` form for a markup renderer."""
    return glyph.fmt(capabilities.supports_emoji)


# ---------------------------------------------------------------------------
# Predefined table
# ---------------------------------------------------------------------------

# (handle, codepoints, plain fallback, color name)
DEFAULT_GLYPHS: tuple[tuple[str, int | tuple[int, ...], str, str], ...] = (
    ("*", 0x2B51, "*", "yellow"),             # BLACK SMALL STAR
    ("i", 0x1D4BE, "i", "blue"),              # MATHEMATICAL SCRIPT SMALL I
    ("?", 0x003F, "?", "blue"),
    ("v", 0x2713, "√", "green"),              # CHECK MARK
    ("x", 0x2717, "X", "red"),                # BALLOT X
    ("b", 0x1F41B, "!", "white"),             # BUG
    (">", 0x00BB, "»", "yellow"),
    ("H", (0x231B, 0xFE0E), "H", "blue"),     # HOURGLASS + text presentation
    ("!", (0x26A0, 0xFE0F), "!", "yellow"),   # WARNING SIGN + emoji presentation
)


def build_default_registry(colors: ColorResolver | None = None) -> GlyphRegistry:
    """Build a registry holding the predefined glyph set."""
    registry = GlyphRegistry(colors)
    for handle, codepoints, plain, color in DEFAULT_GLYPHS:
        registry.register(handle, codepoints, plain, color)
    return registry
