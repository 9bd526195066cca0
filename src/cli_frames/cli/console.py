"""CLI console helpers with optional Rich support.

Diagnostic and error output goes through Rich on stderr.  Frame edges
and glyphs are pre-rendered escape sequences, so they bypass Rich and
are written verbatim with :func:`write_raw`.

Rich is imported lazily so that ``--help`` and ``--version`` keep
working when it is not installed.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from cli_frames.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console(**kwargs: Any) -> Any:
    """Create a Rich console instance; targets stderr unless told otherwise."""
    console_class = _load_rich_console_class()
    kwargs.setdefault("stderr", True)
    return console_class(**kwargs)


def write_raw(text: str, stream: TextIO | None = None) -> None:
    """Write pre-rendered terminal output without any markup processing."""
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stderr print."""
        try:
            rich_console = get_rich_console()
        except EnvironmentError:
            print(*objects, file=sys.stderr)
            return
        rich_console.print(*objects)


console = _ConsoleProxy()
