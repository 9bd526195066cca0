"""Infrastructure layer — integration with the host environment.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Exposes plain snapshots consumed by the core layer.
"""

from cli_frames.infra.terminal_detector import (
    detect_capabilities,
    is_capability_limited,
    supports_emoji,
)

__all__: list[str] = [
    "detect_capabilities",
    "is_capability_limited",
    "supports_emoji",
]
