"""Domain models for limit-users-cpu.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

SLICE_TEMPLATE: str = "user-{uid}.slice"
"""Name of the per-user slice systemd creates for each logged-in UID."""


# ---------------------------------------------------------------------------
# Invocation
# ---------------------------------------------------------------------------

class Mode(enum.Enum):
    """The two mutually exclusive things a run can do."""

    SET = "set"
    SHOW = "show"


@dataclass(frozen=True, slots=True)
class Invocation:
    """A fully parsed command line."""

    mode: Mode

    users: tuple[str, ...]
    """Usernames in command-line order.  Duplicates are kept."""

    quota: str | None = None
    """Raw quota argument.  ``""`` removes the limit; ``None`` in show mode."""

    dry_run: bool = False
    verbose: bool = False


# ---------------------------------------------------------------------------
# Per-user resolution
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class UserSlice:
    """A username resolved to its UID and systemd slice."""

    username: str
    uid: int

    @property
    def slice_name(self) -> str:
        """The ``user-<uid>.slice`` unit name for this user."""
        return SLICE_TEMPLATE.format(uid=self.uid)


# ---------------------------------------------------------------------------
# Per-user outcomes
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class QuotaChange:
    """A planned ``CPUQuota`` mutation for one user.

    Reported *before* the command runs, so the CLI can echo it in
    verbose and dry-run modes.
    """

    user: UserSlice

    quota: str
    """Normalized quota value.  ``""`` means the limit is removed."""

    command: str
    """Human-readable command line that applies the change."""

    dry_run: bool


@dataclass(frozen=True, slots=True)
class QuotaReading:
    """The current CPU quota of one user's slice."""

    user: UserSlice

    raw: str
    """Value of ``CPUQuotaPerSecUSec`` as reported by the service manager."""

    display: str
    """``"no limit"``, a percentage such as ``"50.0%"``, or *raw* verbatim."""
