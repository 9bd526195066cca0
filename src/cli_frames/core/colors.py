"""Named color table and the default color resolver.

The table mirrors the SGR palette used by frame edges and glyphs.  Each
entry also carries the rich style that produces the same escape code, so
the markup renderer can delegate ANSI generation to rich.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from types import MappingProxyType

from cli_frames.core.models import Color
from cli_frames.exceptions import UnknownColor

RED = Color("red", "31", "red")
GREEN = Color("green", "32", "green")
YELLOW = Color("yellow", "33", "yellow")
# 94 (bright blue) reads better than 34 on dark backgrounds.
BLUE = Color("blue", "94", "bright_blue")
MAGENTA = Color("magenta", "35", "magenta")
CYAN = Color("cyan", "36", "cyan")
RESET = Color("reset", "0", "none")
BOLD = Color("bold", "1", "bold")
ITALIC = Color("italic", "3", "italic")
UNDERLINE = Color("underline", "4", "underline")
WHITE = Color("white", "97", "bright_white")
GRAY = Color("gray", "38;5;244", "color(244)")
ORANGE = Color("orange", "38;5;214", "color(214)")

DEFAULT_COLORS: tuple[Color, ...] = (
    RED,
    GREEN,
    YELLOW,
    BLUE,
    MAGENTA,
    CYAN,
    RESET,
    BOLD,
    ITALIC,
    UNDERLINE,
    WHITE,
    GRAY,
    ORANGE,
)


class ColorTable:
    """Immutable name → :class:`Color` lookup.

    Parameters
    ----------
    colors:
        Colors to expose.  Defaults to :data:`DEFAULT_COLORS`.
    """

    def __init__(self, colors: Iterable[Color] = DEFAULT_COLORS) -> None:
        self._by_name = MappingProxyType({c.name: c for c in colors})

    def resolve(self, color: Color | str) -> Color:
        """Return the :class:`Color` for a name or pass a :class:`Color` through.

        Names are matched case-insensitively.  A :class:`Color` instance
        is accepted only if the table knows its name, so a stray color
        object cannot bypass validation.

        Raises
        ------
        UnknownColor
            When *color* does not name a known color.
        """
        if isinstance(color, Color):
            known = self._by_name.get(color.name)
            if known is None:
                raise UnknownColor(color.name, self.available())
            return color
        if isinstance(color, str):
            found = self._by_name.get(color.strip().lower())
            if found is not None:
                return found
        raise UnknownColor(color, self.available())

    def available(self) -> tuple[str, ...]:
        return tuple(self._by_name)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def __iter__(self) -> Iterator[Color]:
        return iter(self._by_name.values())

    def __len__(self) -> int:
        return len(self._by_name)
