"""Core layer — pure escape-sequence construction and glyph resolution.

Rules
-----
* No ``print()`` calls, no stream writes.
* No environment or platform probing; capabilities arrive as snapshots.
* No imports from ``cli`` or ``infra``.
"""

from cli_frames.core.colors import ColorTable
from cli_frames.core.frame import FrameEdgeRenderer
from cli_frames.core.glyphs import GlyphRegistry, build_default_registry
from cli_frames.core.models import Color, Glyph, TerminalCapabilities
from cli_frames.core.protocols import (
    CapabilitySource,
    ColorResolver,
    PrefixWidthSource,
    TextMarkupRenderer,
)

__all__: list[str] = [
    "CapabilitySource",
    "Color",
    "ColorResolver",
    "ColorTable",
    "FrameEdgeRenderer",
    "Glyph",
    "GlyphRegistry",
    "PrefixWidthSource",
    "TerminalCapabilities",
    "TextMarkupRenderer",
    "build_default_registry",
]
