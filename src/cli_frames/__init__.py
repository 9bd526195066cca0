"""cli-frames — framed, colorized terminal lines and capability-aware glyphs.

Pure string-building primitives with a strict layered architecture:
``core`` builds the escape sequences, ``infra`` probes the terminal,
``cli`` ties both to a console script.
"""

from cli_frames.core.frame import FrameEdgeRenderer
from cli_frames.core.glyphs import GlyphRegistry, build_default_registry
from cli_frames.core.models import Color, Glyph, TerminalCapabilities
from cli_frames.exceptions import (
    CliFramesError,
    DuplicateHandle,
    UnknownColor,
    UnknownGlyphHandle,
)
from cli_frames.version import __version__

__all__: list[str] = [
    "CliFramesError",
    "Color",
    "DuplicateHandle",
    "FrameEdgeRenderer",
    "Glyph",
    "GlyphRegistry",
    "TerminalCapabilities",
    "UnknownColor",
    "UnknownGlyphHandle",
    "__version__",
    "build_default_registry",
]
