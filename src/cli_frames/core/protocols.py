"""Protocols (interfaces) consumed by the core layer.

These define the contracts that collaborators outside ``core`` must
satisfy.  Core code depends ONLY on these protocols, never on the
concrete rich-backed renderer or the environment probe, so tests can
inject plain fakes and compare outputs as exact strings.
"""

from __future__ import annotations

from typing import Protocol

from cli_frames.core.models import Color, TerminalCapabilities


class ColorResolver(Protocol):
    """Contract for turning a color identifier into a :class:`Color`."""

    def resolve(self, color: Color | str) -> Color:
        """Return the :class:`Color` for *color*.

        Raises
        ------
        UnknownColor
            When *color* is not a known identifier.
        """
        ...  # pragma: no cover


class TextMarkupRenderer(Protocol):
    """Contract for rendering ``{{color:text}}`` tagged strings."""

    def resolve_text(self, markup: str) -> str:
        """Return *markup* with its color tags replaced by terminal output."""
        ...  # pragma: no cover


class CapabilitySource(Protocol):
    """Zero-argument callable returning the current capability snapshot."""

    def __call__(self) -> TerminalCapabilities:
        ...  # pragma: no cover


class PrefixWidthSource(Protocol):
    """Zero-argument callable returning the enclosing frames' prefix width.

    The value is the number of columns already consumed on the line by
    frame-nesting indentation; it must be non-negative.
    """

    def __call__(self) -> int:
        ...  # pragma: no cover
