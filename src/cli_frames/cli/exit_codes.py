"""Process exit codes returned by ``cli-frames`` commands.

``main`` returns one of these and the console-script wrapper passes it
to :func:`sys.exit`.
"""

from __future__ import annotations

SUCCESS: int = 0
"""The command drew its output (or ``doctor`` found no failing check)."""

GENERAL_ERROR: int = 1
"""A :class:`~cli_frames.exceptions.CliFramesError` (unknown color, bad
override value, missing Rich) or a failing ``doctor`` check."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""

UNEXPECTED_ERROR: int = 2
"""Any other exception reached the error boundary in ``cli()``."""
