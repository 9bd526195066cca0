"""Shared pytest fixtures and configuration for the cli-frames test suite.

Guidelines
----------
* Renderers get fake collaborators so outputs compare as exact strings.
* Capability detection is driven through explicit environ/system
  arguments or ``monkeypatch``; tests must not depend on OS state.
"""

from __future__ import annotations

import pytest

from cli_frames.core.colors import ColorTable
from cli_frames.core.frame import FrameEdgeRenderer
from cli_frames.core.models import TerminalCapabilities

ENV_VARS = ("CI", "CLI_FRAMES_EMOJI", "CLI_FRAMES_LIMITED", "NO_COLOR")


class EchoMarkup:
    """Markup renderer that returns its input untouched."""

    def resolve_text(self, markup: str) -> str:
        return markup


@pytest.fixture(autouse=True)
def _clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def colors() -> ColorTable:
    return ColorTable()


@pytest.fixture
def make_renderer(colors: ColorTable):
    """Factory building a renderer with fixed capabilities and prefix width."""

    def _make(
        *,
        limited: bool = False,
        prefix: int = 0,
    ) -> FrameEdgeRenderer:
        caps = TerminalCapabilities(capability_limited=limited)
        return FrameEdgeRenderer(
            colors,
            EchoMarkup(),
            capabilities=lambda: caps,
            prefix_width=lambda: prefix,
        )

    return _make
