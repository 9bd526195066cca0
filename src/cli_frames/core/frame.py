"""Frame edge renderer — the open / divider / close lines of a frame.

Output shapes::

    ┏━━ Open
    ┣━━ Divider
    ┗━━ Close  3.2s

Two strategies share a single line builder:

* **Interactive** — hide the cursor, return to column 1, jump to the
  column where the enclosing frames' prefix ends (overwriting its final
  space), write, show the cursor again.
* **Capability-limited** — for log-capturing CI that understands colors
  but not cursor addressing: write the colored line sequentially, no
  cursor movement at all.

Nothing here writes to a stream; every method returns the finished line
(newline included) for the caller to write.
"""

from __future__ import annotations

import logging

from cli_frames.core import ansi
from cli_frames.core.colors import RESET
from cli_frames.core.models import Color, TerminalCapabilities
from cli_frames.core.protocols import (
    CapabilitySource,
    ColorResolver,
    PrefixWidthSource,
    TextMarkupRenderer,
)

logger = logging.getLogger(__name__)

STYLE_NAME: str = "bracket"

VERTICAL: str = "┃"
HORIZONTAL: str = "━"
DIVIDER: str = "┣"
TOP_LEFT: str = "┏"
BOTTOM_LEFT: str = "┗"

PREFIX: str = VERTICAL
"""Per-level prefix drawn by enclosing frames."""


def prefix_width(depth: int) -> int:
    """Columns consumed by *depth* levels of ``┃ `` prefixes."""
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return depth * (ansi.printing_width(PREFIX) + 1)


def _interactive() -> TerminalCapabilities:
    return TerminalCapabilities.INTERACTIVE


def _no_prefix() -> int:
    return 0


class FrameEdgeRenderer:
    """Build frame edge lines in the ``bracket`` style.

    Parameters
    ----------
    colors:
        Resolves color names (or validates :class:`Color` objects).
    markup:
        Renders the ``{{color:text}}`` label tag.
    capabilities:
        Queried on every call that does not pass an explicit snapshot.
        Defaults to an always-interactive terminal.
    prefix_width:
        Columns already occupied by enclosing frames.  Defaults to 0.
    """

    def __init__(
        self,
        colors: ColorResolver,
        markup: TextMarkupRenderer,
        *,
        capabilities: CapabilitySource = _interactive,
        prefix_width: PrefixWidthSource = _no_prefix,
    ) -> None:
        self._colors = colors
        self._markup = markup
        self._capabilities = capabilities
        self._prefix_width = prefix_width

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def open(
        self,
        text: str | None,
        color: Color | str,
        *,
        capabilities: TerminalCapabilities | None = None,
    ) -> str:
        """Draw the opening edge: ``┏━━ text``."""
        return self._edge(text, color, TOP_LEFT, None, capabilities)

    def divider(
        self,
        text: str | None,
        color: Color | str,
        *,
        capabilities: TerminalCapabilities | None = None,
    ) -> str:
        """Draw a divider edge: ``┣━━ text``."""
        return self._edge(text, color, DIVIDER, None, capabilities)

    def close(
        self,
        text: str | None,
        color: Color | str,
        right_text: str | None = None,
        *,
        capabilities: TerminalCapabilities | None = None,
    ) -> str:
        """Draw the closing edge: ``┗━━ text``, optionally with trailing text."""
        return self._edge(text, color, BOTTOM_LEFT, right_text, capabilities)

    # ------------------------------------------------------------------
    # Line builder
    # ------------------------------------------------------------------

    def _edge(
        self,
        text: str | None,
        color: Color | str,
        first: str,
        right_text: str | None,
        capabilities: TerminalCapabilities | None,
    ) -> str:
        resolved = self._colors.resolve(color)
        caps = capabilities if capabilities is not None else self._capabilities()

        preamble = resolved.code + first + HORIZONTAL * 2
        if text:
            label = self._markup.resolve_text(f"{{{{{resolved.name}:{text}}}}}")
            preamble += " " + label + " "

        suffix = ""
        if right_text is not None:
            suffix = " " + right_text + " "

        if caps.capability_limited:
            return resolved.code + preamble + resolved.code + suffix + RESET.code + "\n"

        preamble_start = self._prefix_width()
        if preamble_start < 0:
            raise ValueError(f"prefix width must be >= 0, got {preamble_start}")
        # Overwrite the final space of the enclosing prefix.
        if preamble_start:
            preamble_start -= 1

        logger.debug("drawing %s edge at column %d", first, preamble_start + 1)
        return (
            ansi.hide_cursor()
            # Column 1 first, in case ^C left the cursor mid-line.
            + "\r"
            + resolved.code
            + ansi.cursor_horizontal_absolute(1 + preamble_start)
            + preamble
            + resolved.code
            + suffix
            + RESET.code
            + ansi.show_cursor()
            + "\n"
        )
