"""Infrastructure: systemctl detection and platform guidance.

This module is responsible for locating ``systemctl`` on the system
PATH and explaining why the tool cannot run when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only — no subprocess.
* No permanent PATH modification.
* No ``print()`` — callers handle user-facing output.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from limit_users_cpu.exceptions import SystemctlNotFoundError

SYSTEMCTL: str = "systemctl"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SystemctlStatus:
    """Result of a systemctl detection probe.

    Attributes
    ----------
    found : bool
        Whether systemctl was located on PATH.
    path : Path | None
        Absolute path to the systemctl binary, or ``None``.
    version_hint : str
        Human-readable status string (e.g. ``"found at …"`` or ``"not found"``).
    """

    found: bool
    path: Path | None
    version_hint: str


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_systemctl() -> SystemctlStatus:
    """Probe the system for a systemctl binary.

    Returns a :class:`SystemctlStatus` regardless of whether systemctl is
    present — the caller decides whether to abort.
    """
    result = shutil.which(SYSTEMCTL)

    if result is not None:
        resolved = Path(result).resolve()
        return SystemctlStatus(
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
        )

    return SystemctlStatus(found=False, path=None, version_hint="not found")


def require_systemctl() -> Path:
    """Locate systemctl or raise :class:`SystemctlNotFoundError`.

    Called before any run that talks to the service manager; dry runs
    do not need it.
    """
    status = detect_systemctl()
    if not status.found or status.path is None:
        raise SystemctlNotFoundError(
            "systemctl is not installed or not on PATH.",
            hint=_platform_hint(),
        )
    return status.path


# ---------------------------------------------------------------------------
# Platform-specific guidance
# ---------------------------------------------------------------------------

def _platform_hint() -> str:
    """Return guidance appropriate for the current OS."""
    system = platform.system().lower()
    if system == "linux":
        return (
            "Per-user CPU quotas require systemd. "
            "Run this tool on a systemd-based host, or use --dry-run to preview."
        )
    return (
        f"Per-user CPU quotas are only supported on Linux with systemd "
        f"(detected: {platform.system() or 'unknown'})."
    )
