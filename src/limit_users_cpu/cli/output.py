"""Status-line rendering for the CLI layer.

The ``*_line`` helpers are pure string builders (unit-tested directly);
the ``report_*`` functions print them and are wired into
:class:`~limit_users_cpu.core.quota_service.QuotaService` as callbacks.
"""

from __future__ import annotations

from limit_users_cpu.cli.console import console
from limit_users_cpu.core.models import Invocation, Mode, QuotaChange, QuotaReading
from limit_users_cpu.core.quota import normalize_quota


# ---------------------------------------------------------------------------
# Line builders (pure)
# ---------------------------------------------------------------------------

def missing_user_line(username: str) -> str:
    return f"Warning: User '{username}' does not exist. Skipping."


def intent_line(invocation: Invocation) -> str:
    """Describe what the run is about to do, for verbose mode."""
    users = " ".join(invocation.users)
    if invocation.mode is Mode.SHOW:
        return f"Showing CPU quota for the following users: {users}"
    if not invocation.quota:
        return f"Removing CPU quota for the following users: {users}"
    quota = normalize_quota(invocation.quota)
    return f"Setting CPU quota to '{quota}' for the following users: {users}"


def executing_line(change: QuotaChange) -> str:
    user = change.user
    return f"Executing command for {user.username} (UID: {user.uid}): {change.command}"


def dry_run_line(change: QuotaChange) -> str:
    return f"Dry-run: {change.command}"


def reading_line(reading: QuotaReading) -> str:
    user = reading.user
    return (
        f"{user.username} (UID: {user.uid}, {user.slice_name}): "
        f"CPU quota {reading.display}"
    )


# ---------------------------------------------------------------------------
# Printers
# ---------------------------------------------------------------------------

def report_intent(invocation: Invocation) -> None:
    console.print(intent_line(invocation))
    if invocation.dry_run and invocation.mode is Mode.SET:
        console.print("Dry-run mode is enabled: No changes will be made.")


def report_missing_user(username: str) -> None:
    console.print(missing_user_line(username), style="yellow")


def report_reading(reading: QuotaReading) -> None:
    console.print(reading_line(reading))


class ChangeReporter:
    """Callback printing each planned change per the verbose/dry-run flags."""

    def __init__(self, *, verbose: bool) -> None:
        self._verbose = verbose

    def __call__(self, change: QuotaChange) -> None:
        if self._verbose:
            console.print(executing_line(change))
        if change.dry_run:
            console.print(dry_run_line(change))
