"""Text markup renderer for ``{{color:text}}`` tags.

Frame labels and glyph markup forms are emitted as ``{{name:text}}``
tags.  :class:`RichMarkupRenderer` wraps each tag's text in the SGR
sequence Rich derives from the tag color's rich style.  The text itself
is never laid out, so tabs, carriage returns and Rich markup inside a
tag come out exactly as given.

Only whole tags are recognised; everything outside a tag is copied
verbatim.
"""

from __future__ import annotations

import re
from typing import Any

from cli_frames.core.colors import ColorTable
from cli_frames.core.protocols import ColorResolver
from cli_frames.exceptions import EnvironmentError

_TAG_RE = re.compile(r"\{\{([A-Za-z_]+):(.*?)\}\}", re.DOTALL)


class RichMarkupRenderer:
    """Render color tags to ANSI escape sequences via Rich styles.

    Parameters
    ----------
    colors:
        Resolves tag color names.  Unknown names raise
        :class:`~cli_frames.exceptions.UnknownColor`.
    color_system:
        Rich color system name; ``"256"`` keeps the extended palette
        colors (gray, orange) exact.
    """

    def __init__(
        self,
        colors: ColorResolver | None = None,
        *,
        color_system: str = "256",
    ) -> None:
        self._colors: ColorResolver = colors or ColorTable()
        self._color_system_name = color_system
        self._styles: dict[str, Any] = {}

    def resolve_text(self, markup: str) -> str:
        return _TAG_RE.sub(self._render_tag, markup)

    def _render_tag(self, match: re.Match[str]) -> str:
        color = self._colors.resolve(match.group(1))
        return self._render(match.group(2), color.rich_style)

    def _render(self, text: str, style_name: str) -> str:
        try:
            from rich.console import COLOR_SYSTEMS
            from rich.style import Style
        except ModuleNotFoundError as exc:
            raise EnvironmentError(
                "rich is not installed. Install with: pip install rich",
            ) from exc

        style = self._styles.get(style_name)
        if style is None:
            style = self._styles[style_name] = Style.parse(style_name)
        return style.render(text, color_system=COLOR_SYSTEMS[self._color_system_name])
