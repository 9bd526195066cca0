"""``cli-frames doctor`` — terminal capability diagnostics.

Collects what the capability probe decided (and why) and renders a Rich
table, or a plain table when Rich is missing.  No rendering decisions
are made here; it only reports them.
"""

from __future__ import annotations

import os
import platform
import sys
from importlib import metadata

from cli_frames.cli import exit_codes
from cli_frames.cli.console import console
from cli_frames.core.frame import STYLE_NAME
from cli_frames.core.models import TerminalCapabilities
from cli_frames.infra.terminal_detector import (
    CI_VAR,
    EMOJI_OVERRIDE_VAR,
    LIMITED_OVERRIDE_VAR,
    detect_capabilities,
)
from cli_frames.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _cliframes_version_check() -> Check:
    return "cli-frames", __version__, "[green]OK[/green]"


def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _rich_version_check() -> Check:
    """Return (label, value, status) for the Rich row.

    Rich is needed for colored labels; without it output degrades to
    plain text, so a missing install is a warning, not a failure.
    """
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "rich", "NOT INSTALLED", "[yellow]WARN[/yellow]"


def _mode_source(capabilities: TerminalCapabilities, forced_by: str | None) -> str | None:
    """Name whatever decided the rendering mode, in detection precedence."""
    if forced_by:
        return forced_by
    override = os.environ.get(LIMITED_OVERRIDE_VAR, "")
    if override:
        return f"{LIMITED_OVERRIDE_VAR}={override}"
    ci = os.environ.get(CI_VAR, "")
    if ci:
        return f"{CI_VAR}={ci}"
    # Nothing in the environment asks for limited output.
    return "forced" if capabilities.capability_limited else None


def _mode_check(
    capabilities: TerminalCapabilities,
    forced_by: str | None = None,
) -> Check:
    """Return (label, value, status) for the rendering-mode row.

    *forced_by* names a command-line flag that overrode detection.
    """
    mode = "capability-limited" if capabilities.capability_limited else "interactive"
    source = _mode_source(capabilities, forced_by)
    value = f"{mode} ({source})" if source else mode
    return "Mode", value, "[green]OK[/green]"


def _frame_style_check() -> Check:
    return "Frame style", STYLE_NAME, "[green]OK[/green]"


def _emoji_check(capabilities: TerminalCapabilities) -> Check:
    """Return (label, value, status) for the emoji row."""
    if capabilities.supports_emoji:
        return "Emoji", "supported", "[green]OK[/green]"
    return "Emoji", f"plain fallbacks (see {EMOJI_OVERRIDE_VAR})", "[yellow]WARN[/yellow]"


def _encoding_check() -> Check:
    """Return (label, value, status) for the stdout encoding row."""
    encoding = getattr(sys.stdout, "encoding", None) or "unknown"
    ok = "utf" in encoding.lower()
    status = "[green]OK[/green]" if ok else "[yellow]WARN[/yellow]"
    return "Encoding", encoding, status


def _os_check() -> Check:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\ncli-frames doctor", file=sys.stderr)
    print("=" * 64, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<40} {'Status':<8}", file=sys.stderr)
    print("-" * 64, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<40} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(
    capabilities: TerminalCapabilities | None = None,
    *,
    forced_by: str | None = None,
) -> int:
    """Run all diagnostic checks and render a summary table.

    Parameters
    ----------
    capabilities:
        The snapshot to report.  When ``None`` the environment is probed.
    forced_by:
        Command-line flag that overrode mode detection, if any.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check fails,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    caps = capabilities if capabilities is not None else detect_capabilities()
    checks = [
        _cliframes_version_check(),
        _python_version_check(),
        _rich_version_check(),
        _mode_check(caps, forced_by),
        _frame_style_check(),
        _emoji_check(caps),
        _encoding_check(),
        _os_check(),
    ]
    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
    else:
        table = Table(
            title="cli-frames doctor",
            show_header=True,
            header_style="bold cyan",
            border_style="dim",
        )
        table.add_column("Component", style="bold", min_width=12)
        table.add_column("Value", min_width=20)
        table.add_column("Status", justify="center", min_width=8)
        for label, value, status in checks:
            table.add_row(label, value, status)

        console.print()
        console.print(table)
        console.print()
        if has_failure:
            console.print("[bold red]Some checks failed.[/bold red]")
        else:
            console.print("[bold green]All checks passed.[/bold green]")

    return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS
