"""CLI application entry point and command routing for limit-users-cpu.

This module is the **sole error boundary** for the entire application.
It catches :class:`~limit_users_cpu.exceptions.CpuQuotaError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages via Rich and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core/service
  and infrastructure layers.
* ``print()`` is forbidden outside the CLI layer; the console proxy is used
  exclusively.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from typing import NoReturn

from limit_users_cpu.cli import exit_codes
from limit_users_cpu.cli.console import err_console
from limit_users_cpu.cli.output import (
    ChangeReporter,
    report_intent,
    report_missing_user,
    report_reading,
)
from limit_users_cpu.core.models import Invocation, Mode
from limit_users_cpu.core.quota_service import QuotaService
from limit_users_cpu.exceptions import CommandFailedError, CpuQuotaError, UsageError
from limit_users_cpu.version import __version__

_PROG = "limit-users-cpu"

_EPILOG = f"""\
To remove the CPU quota, pass an empty value for CPU_QUOTA.

examples:
  {_PROG} -d 10% user1 user2     Display the commands without executing them.
  {_PROG} -v 10% user1 user2     Display detailed information during execution.
  {_PROG} 10% user1 user2        Set the CPU quota to 10% for user1 and user2.
  {_PROG} '' user1 user2         Remove the CPU quota for user1 and user2.
  {_PROG} -s user1 user2         Show the current CPU quota of user1 and user2.
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _ArgumentParser(argparse.ArgumentParser):
    """Parser that reports malformed input as :class:`UsageError`."""

    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``limit-users-cpu [-d] [-v] <CPU_QUOTA> <USER>...`` — set or remove
    * ``limit-users-cpu -s [-v] <USER>...``              — show
    * ``limit-users-cpu --version``
    """
    parser = _ArgumentParser(
        prog=_PROG,
        usage=(
            "%(prog)s [-d] [-v] <CPU_QUOTA> <USER>...\n"
            "       %(prog)s -s [-v] <USER>..."
        ),
        description="Set, remove, or show the CPU quota of per-user systemd slices.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Display the commands that would be executed, without making any changes.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Display detailed information about each operation.",
    )
    parser.add_argument(
        "-s",
        "--show",
        action="store_true",
        help="Show the current CPU quota of each user instead of changing it.",
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        metavar="CPU_QUOTA USER",
        help=(
            "The CPU quota (as a percentage, e.g. '10%%') followed by the "
            "users to apply it to.  In --show mode, only users."
        ),
    )
    return parser


def _split_leading_flags(argv: list[str]) -> tuple[list[str], list[str]]:
    """Split *argv* into leading flags and positionals.

    Flags are only recognised before the first positional; everything
    from there on (including ``-d`` and friends) is a positional.  A
    ``--`` ends the flags and is dropped.  The empty string is a
    positional (the "remove quota" value).
    """
    for index, token in enumerate(argv):
        if token == "--":
            return argv[:index], argv[index + 1:]
        if not token.startswith("-") or token == "-":
            return argv[:index], argv[index:]
    return list(argv), []


def _to_invocation(args: argparse.Namespace) -> Invocation:
    """Interpret parsed flags and positionals.

    Raises
    ------
    UsageError
        When no users remain after the quota is taken.
    """
    positionals: list[str] = list(args.arguments)

    if args.show:
        if not positionals:
            raise UsageError("No users provided for --show.")
        return Invocation(
            mode=Mode.SHOW,
            users=tuple(positionals),
            dry_run=args.dry_run,
            verbose=args.verbose,
        )

    if len(positionals) < 2:
        raise UsageError("No users provided.")
    quota, *users = positionals
    return Invocation(
        mode=Mode.SET,
        users=tuple(users),
        quota=quota,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _build_service(invocation: Invocation) -> QuotaService:
    """Wire infra adapters into a :class:`QuotaService`.

    systemctl must be present unless the run is a dry run of a change.
    """
    from limit_users_cpu.infra.passwd_accounts import PasswdAccountDatabase
    from limit_users_cpu.infra.systemctl_detector import require_systemctl
    from limit_users_cpu.infra.systemctl_service_manager import SystemctlServiceManager

    if invocation.mode is Mode.SHOW or not invocation.dry_run:
        require_systemctl()
    return QuotaService(SystemctlServiceManager(), PasswdAccountDatabase())


def _handle_invocation(invocation: Invocation) -> int:
    """Run one invocation against the service.

    Flow:
    1. Check prerequisites and wire the service.
    2. In verbose mode, announce what is about to happen.
    3. Process each user in order, printing as we go.
    """
    service = _build_service(invocation)

    if invocation.verbose:
        report_intent(invocation)

    if invocation.mode is Mode.SHOW:
        service.show_quota(
            invocation.users,
            on_reading=report_reading,
            on_missing=report_missing_user,
        )
    else:
        service.apply_quota(
            invocation.quota or "",
            invocation.users,
            dry_run=invocation.dry_run,
            on_change=ChangeReporter(verbose=invocation.verbose),
            on_missing=report_missing_user,
        )
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the limit-users-cpu CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    if argv is None:
        argv = sys.argv[1:]
    parser = _build_parser()

    if not argv:
        parser.print_help()
        return exit_codes.SUCCESS

    try:
        flags, positionals = _split_leading_flags(argv)
        args = parser.parse_args(flags)
        args.arguments = positionals
        invocation = _to_invocation(args)
    except UsageError as exc:
        err_console.print(f"Error: {exc}", style="bold red")
        parser.print_help()
        return exit_codes.USAGE_ERROR

    return _handle_invocation(invocation)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CommandFailedError as exc:
        err_console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            err_console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exc.returncode)
    except CpuQuotaError as exc:
        err_console.print(f"Error: {exc}", style="bold red")
        if exc.hint:
            err_console.print(f"Hint: {exc.hint}", style="yellow")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        err_console.print("\nAborted by user.", style="yellow")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "Unexpected error. Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}",
            style="bold red",
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
