"""Infrastructure: terminal capability probe.

Builds the :class:`~cli_frames.core.models.TerminalCapabilities`
snapshot the core consumes.  Two signals are probed:

* **capability-limited** — the ``CI`` environment variable.  Hosted CI
  log viewers emulate colors but not cursor addressing.
* **emoji support** — the operating system.  The classic Windows
  console cannot draw emoji; macOS and Linux terminals can.

Both can be forced with ``CLI_FRAMES_LIMITED`` / ``CLI_FRAMES_EMOJI``.

Rules
-----
* Reads the environment and :func:`platform.system` only.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import logging
import os
import platform
from collections.abc import Mapping

from cli_frames.core.models import TerminalCapabilities
from cli_frames.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

CI_VAR: str = "CI"
EMOJI_OVERRIDE_VAR: str = "CLI_FRAMES_EMOJI"
LIMITED_OVERRIDE_VAR: str = "CLI_FRAMES_LIMITED"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


# ---------------------------------------------------------------------------
# Individual signals
# ---------------------------------------------------------------------------

def is_capability_limited(environ: Mapping[str, str] | None = None) -> bool:
    """Return ``True`` when running under CI.

    ``CI`` unset, empty or ``"0"`` means an interactive terminal; any
    other value means capability-limited.
    """
    env = os.environ if environ is None else environ
    value = env.get(CI_VAR)
    return value not in (None, "", "0")


def supports_emoji(system: str | None = None) -> bool:
    """Return ``True`` unless the operating system is Windows."""
    name = platform.system() if system is None else system
    return name.lower() != "windows"


def parse_flag(name: str, value: str) -> bool:
    """Parse an on/off environment override.

    Raises
    ------
    ConfigurationError
        When *value* is not a recognised boolean spelling.
    """
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ConfigurationError(
        f"{name} must be a boolean, got {value!r}",
        hint=f"Set {name} to one of: 1, 0, true, false, yes, no.",
    )


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

def detect_capabilities(
    environ: Mapping[str, str] | None = None,
    system: str | None = None,
) -> TerminalCapabilities:
    """Probe the environment and return a capability snapshot.

    Overrides win over detection; an empty override is ignored.
    """
    env = os.environ if environ is None else environ

    limited = is_capability_limited(env)
    override = env.get(LIMITED_OVERRIDE_VAR, "")
    if override:
        limited = parse_flag(LIMITED_OVERRIDE_VAR, override)

    emoji = supports_emoji(system)
    override = env.get(EMOJI_OVERRIDE_VAR, "")
    if override:
        emoji = parse_flag(EMOJI_OVERRIDE_VAR, override)

    logger.debug(
        "terminal capabilities: capability_limited=%s supports_emoji=%s",
        limited,
        emoji,
    )
    return TerminalCapabilities(capability_limited=limited, supports_emoji=emoji)
