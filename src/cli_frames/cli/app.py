"""CLI application entry point and command routing for cli-frames.

This module is the **sole error boundary** for the console script.  It
catches :class:`~cli_frames.exceptions.CliFramesError`,
``KeyboardInterrupt`` and any unexpected ``Exception``, renders a short
message via Rich and returns well-defined exit codes.

Architecture notes
------------------
* Rendering happens in ``core``; this module wires collaborators
  together and writes the finished strings.
* Frame edges and glyphs go to stdout verbatim; diagnostics go to
  stderr through Rich.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace

from cli_frames.cli import exit_codes
from cli_frames.cli.console import console, write_raw
from cli_frames.cli.logging_setup import configure_logging
from cli_frames.cli.markup import RichMarkupRenderer
from cli_frames.core import frame
from cli_frames.core.colors import RESET, ColorTable
from cli_frames.core.frame import FrameEdgeRenderer
from cli_frames.core.glyphs import GlyphRegistry, build_default_registry, render
from cli_frames.core.models import TerminalCapabilities
from cli_frames.exceptions import CliFramesError, ConfigurationError
from cli_frames.infra.terminal_detector import detect_capabilities
from cli_frames.version import __version__

logger = logging.getLogger(__name__)

DEFAULT_COLOR: str = "cyan"


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``cli-frames edge {open,divider,close} [TEXT]``
    * ``cli-frames demo``
    * ``cli-frames glyphs``
    * ``cli-frames doctor``
    """
    parser = argparse.ArgumentParser(
        prog="cli-frames",
        description="Draw framed, colorized terminal lines.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log capability detection and rendering decisions to stderr.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--ci",
        dest="limited",
        action="store_const",
        const=True,
        default=None,
        help="Force capability-limited output (no cursor movement).",
    )
    mode.add_argument(
        "--interactive",
        dest="limited",
        action="store_const",
        const=False,
        help="Force cursor-addressed output.",
    )
    parser.add_argument(
        "--no-emoji",
        action="store_true",
        help="Use plain-text glyph fallbacks.",
    )
    parser.add_argument(
        "--depth",
        type=_non_negative_int,
        default=0,
        help="Number of enclosing frames the line is nested in.",
    )

    sub = parser.add_subparsers(dest="command")

    edge = sub.add_parser("edge", help="Print a single frame edge line.")
    edge.add_argument("kind", choices=("open", "divider", "close"))
    edge.add_argument("text", nargs="?", default="")
    edge.add_argument("--color", default=DEFAULT_COLOR)
    edge.add_argument(
        "--right-text",
        default=None,
        help="Trailing text; only valid for 'close'.",
    )

    demo = sub.add_parser("demo", help="Draw a sample frame with glyphs.")
    demo.add_argument("--color", default=DEFAULT_COLOR)

    sub.add_parser("glyphs", help="List the registered glyphs.")
    sub.add_parser("doctor", help="Show detected terminal capabilities.")
    return parser


# ---------------------------------------------------------------------------
# Wiring
# ---------------------------------------------------------------------------

def _resolve_capabilities(args: argparse.Namespace) -> TerminalCapabilities:
    """Detected capabilities with command-line overrides applied."""
    caps = detect_capabilities()
    if args.limited is not None:
        caps = replace(caps, capability_limited=args.limited)
    if args.no_emoji:
        caps = replace(caps, supports_emoji=False)
    logger.debug("effective capabilities: %s", caps)
    return caps


def _build_renderer(
    colors: ColorTable,
    caps: TerminalCapabilities,
    depth: int,
) -> FrameEdgeRenderer:
    width = frame.prefix_width(depth)
    return FrameEdgeRenderer(
        colors,
        RichMarkupRenderer(colors),
        capabilities=lambda: caps,
        prefix_width=lambda: width,
    )


def _outer_prefix(colors: ColorTable, color: str, depth: int) -> str:
    """The ``┃ `` columns drawn by *depth* enclosing frames."""
    code = colors.resolve(color).code
    return (code + frame.PREFIX + RESET.code + " ") * depth


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_edge(args: argparse.Namespace, caps: TerminalCapabilities) -> int:
    if args.right_text is not None and args.kind != "close":
        raise ConfigurationError(
            f"--right-text is not supported for '{args.kind}' edges.",
            hint="Only 'close' draws trailing text.",
        )
    colors = ColorTable()
    renderer = _build_renderer(colors, caps, args.depth)
    if args.kind == "open":
        line = renderer.open(args.text, args.color)
    elif args.kind == "divider":
        line = renderer.divider(args.text, args.color)
    else:
        line = renderer.close(args.text, args.color, right_text=args.right_text)
    write_raw(_outer_prefix(colors, args.color, args.depth) + line)
    return exit_codes.SUCCESS


def _handle_demo(args: argparse.Namespace, caps: TerminalCapabilities) -> int:
    """Draw an open / divider / close frame with a few glyph lines."""
    colors = ColorTable()
    glyphs = build_default_registry(colors)
    renderer = _build_renderer(colors, caps, args.depth)
    outer = _outer_prefix(colors, args.color, args.depth)
    inner = _outer_prefix(colors, args.color, args.depth + 1)

    def body(handle: str, text: str) -> str:
        return inner + render(glyphs.lookup(handle), caps) + " " + text + "\n"

    write_raw(
        outer + renderer.open("Build", args.color)
        + body("v", "compiled 42 modules")
        + body("i", "cache warm")
        + outer + renderer.divider("Tests", args.color)
        + body("v", "118 passed")
        + body("!", "2 skipped")
        + body("x", "1 failed")
        + outer + renderer.close("", args.color, right_text="3.2s"),
    )
    return exit_codes.SUCCESS


def _handle_glyphs(caps: TerminalCapabilities) -> int:
    glyphs = build_default_registry()
    rows = _glyph_rows(glyphs, caps)
    try:
        from rich.markup import escape
        from rich.table import Table
    except ModuleNotFoundError:
        for handle, shown, codepoints, plain, color in rows:
            print(f"{handle:<3} {shown:<3} {codepoints:<16} {plain:<3} {color}", file=sys.stderr)
        return exit_codes.SUCCESS

    table = Table(title="cli-frames glyphs", header_style="bold cyan", border_style="dim")
    for column in ("Handle", "Shown", "Codepoints", "Fallback", "Color"):
        table.add_column(column)
    for handle, shown, codepoints, plain, color in rows:
        table.add_row(escape(handle), f"[{color}]{escape(shown)}[/]", codepoints, escape(plain), color)
    console.print(table)
    return exit_codes.SUCCESS


def _glyph_rows(
    glyphs: GlyphRegistry,
    caps: TerminalCapabilities,
) -> list[tuple[str, str, str, str, str]]:
    rows = []
    for glyph in glyphs:
        codepoints = " ".join(f"U+{cp:04X}" for cp in glyph.codepoints)
        rows.append(
            (
                glyph.handle,
                glyph.char(caps.supports_emoji),
                codepoints,
                glyph.plain,
                glyph.color.rich_style,
            ),
        )
    return rows


def _handle_doctor(args: argparse.Namespace, caps: TerminalCapabilities) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from cli_frames.cli.doctor import run_doctor

    forced_by = None
    if args.limited is not None:
        forced_by = "--ci" if args.limited else "--interactive"
    return run_doctor(caps, forced_by=forced_by)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the cli-frames CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(verbose=args.verbose)
    caps = _resolve_capabilities(args)

    if args.command == "edge":
        return _handle_edge(args, caps)
    if args.command == "demo":
        return _handle_demo(args, caps)
    if args.command == "glyphs":
        return _handle_glyphs(caps)
    return _handle_doctor(args, caps)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except CliFramesError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
