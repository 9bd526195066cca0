"""Custom exception hierarchy for cli-frames.

Every error raised by the library inherits from :class:`CliFramesError`
so that the CLI error boundary can render a clean message without
leaking internal stack traces.  Lookup failures additionally inherit
from the matching builtin (``KeyError`` / ``ValueError``) so library
callers can catch them the usual way.

Hierarchy
---------
CliFramesError
├── UnknownGlyphHandle   (also KeyError)
├── UnknownColor         (also ValueError)
├── DuplicateHandle
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations

from collections.abc import Iterable


class CliFramesError(Exception):
    """Base exception for all cli-frames errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message.
        return str(self.args[0]) if self.args else ""


# --- Lookups ---------------------------------------------------------------

class UnknownGlyphHandle(CliFramesError, KeyError):
    """Raised when a glyph handle is not registered.

    The message enumerates every registered handle, in registration
    order, so a typo can be fixed without reading the source.
    """

    def __init__(self, handle: object, available: Iterable[str]) -> None:
        self.handle = handle
        self.available: tuple[str, ...] = tuple(available)
        keys = ",".join(self.available)
        super().__init__(
            f"invalid glyph handle: {handle} "
            f"-- must be one of GlyphRegistry.available ({keys})",
        )


class UnknownColor(CliFramesError, ValueError):
    """Raised when a color identifier cannot be resolved."""

    def __init__(self, color: object, available: Iterable[str]) -> None:
        self.color = color
        self.available: tuple[str, ...] = tuple(available)
        super().__init__(
            f"invalid color: {color!r}",
            hint=f"Use one of: {', '.join(self.available)}",
        )


# --- Registration ----------------------------------------------------------

class DuplicateHandle(CliFramesError):
    """Raised when a glyph handle is registered twice."""

    def __init__(self, handle: str) -> None:
        self.handle = handle
        super().__init__(f"glyph handle already registered: {handle}")


# --- Environment / configuration --------------------------------------------

class ConfigurationError(CliFramesError):
    """Raised when an environment override or CLI option is malformed."""


class EnvironmentError(CliFramesError):
    """Raised when an optional runtime dependency is not available."""
