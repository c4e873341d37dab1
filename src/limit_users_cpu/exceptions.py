"""Custom exception hierarchy for limit-users-cpu.

All exceptions that cross layer boundaries must inherit from
:class:`CpuQuotaError`.  Raw OS exceptions (``OSError`` from
``subprocess``, ``KeyError`` from ``pwd``) must NEVER propagate beyond
the infrastructure layer — they must be caught and re-raised as a typed
subclass defined here.

Hierarchy
---------
CpuQuotaError
├── UsageError
├── QuotaFormatError
├── EnvironmentError
│   └── SystemctlNotFoundError
└── ServiceManagerError
    └── CommandFailedError
"""

from __future__ import annotations

from collections.abc import Sequence


class CpuQuotaError(Exception):
    """Base exception for all limit-users-cpu errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Invocation ------------------------------------------------------------

class UsageError(CpuQuotaError):
    """Raised when the command line cannot be turned into an invocation."""


# --- Quota values ----------------------------------------------------------

class QuotaFormatError(CpuQuotaError):
    """Raised when a ``CPUQuotaPerSecUSec`` value cannot be parsed."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(CpuQuotaError):
    """Raised when a required runtime dependency is not available."""


class SystemctlNotFoundError(EnvironmentError):
    """Raised when ``systemctl`` cannot be located on the system PATH."""


# --- Service manager -------------------------------------------------------

class ServiceManagerError(CpuQuotaError):
    """Raised when the service manager cannot be driven at all."""


class CommandFailedError(ServiceManagerError):
    """Raised when a service-manager command exits with a non-zero status.

    The CLI propagates :attr:`returncode` as the process exit status.
    """

    def __init__(
        self,
        command: Sequence[str],
        returncode: int,
        *,
        stderr: str = "",
    ) -> None:
        rendered = " ".join(command)
        message = f"Command failed with exit status {returncode}: {rendered}"
        detail = stderr.strip()
        super().__init__(message, hint=detail or None)
        self.command: tuple[str, ...] = tuple(command)
        self.returncode: int = returncode
