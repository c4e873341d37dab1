"""Pure quota value normalization and display conversion.

Every function in this module is a **pure** transformation — no I/O,
no side effects, fully deterministic, and trivially unit-testable.

Two directions are covered:

1. **Input** — a user-supplied percentage is normalized into the form
   ``CPUQuota=`` expects.
2. **Display** — a ``CPUQuotaPerSecUSec`` duration reported by systemd is
   turned back into a percentage for the show command.
"""

from __future__ import annotations

import re

from limit_users_cpu.exceptions import QuotaFormatError

REMOVE_QUOTA: str = ""
"""Quota value that resets ``CPUQuota`` and so removes the limit."""

NO_LIMIT: str = "infinity"
"""``CPUQuotaPerSecUSec`` value reported for slices without a quota."""

USEC_PER_PERCENT: int = 10_000
"""1% of one CPU-second, in microseconds."""

# "m" scales like "ms" rather than minutes.  This mirrors the shell tool
# this one replaces; systemd itself prints minutes as "min".
_UNIT_MULTIPLIERS: dict[str, int] = {
    "us": 1,
    "ms": 1_000,
    "s": 1_000_000,
    "m": 1_000,
}

_DURATION_RE = re.compile(r"^(\d+)(us|ms|s|m)?$")


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------

def normalize_quota(raw: str) -> str:
    """Return *raw* with exactly one trailing ``%``.

    The empty string is passed through untouched: it is a valid value
    meaning "remove the limit".
    """
    if raw == REMOVE_QUOTA or raw.endswith("%"):
        return raw
    return f"{raw}%"


# ---------------------------------------------------------------------------
# Display
# ---------------------------------------------------------------------------

def parse_quota_duration(raw: str) -> int | None:
    """Convert a ``CPUQuotaPerSecUSec`` value to microseconds.

    Returns ``None`` for ``infinity``.  A missing unit means ``us``.

    Raises
    ------
    QuotaFormatError
        If *raw* is not ``infinity`` or ``<integer><unit>?``.
    """
    value = raw.strip()
    if value == NO_LIMIT:
        return None
    match = _DURATION_RE.match(value)
    if match is None:
        raise QuotaFormatError(f"Unrecognised CPU quota value: {raw!r}")
    amount, unit = match.groups()
    return int(amount) * _UNIT_MULTIPLIERS[unit or "us"]


def format_quota_percent(raw: str) -> str:
    """Render a ``CPUQuotaPerSecUSec`` value as ``"no limit"`` or ``"NN.N%"``.

    Raises
    ------
    QuotaFormatError
        If *raw* cannot be parsed.
    """
    usec = parse_quota_duration(raw)
    if usec is None:
        return "no limit"
    return f"{usec / USEC_PER_PERCENT:.1f}%"
