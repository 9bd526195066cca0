"""Allow ``python -m cli_frames`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cli_frames`` behaves identically to the ``cli-frames``
console script.
"""

from __future__ import annotations

from cli_frames.cli.app import cli

if __name__ == "__main__":
    cli()
