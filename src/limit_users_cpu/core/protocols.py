"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class AccountDatabase(Protocol):
    """Contract for looking users up in the system account database.

    Any object that implements :meth:`lookup_uid` with the correct
    signature satisfies this protocol structurally (no explicit
    inheritance required).
    """

    def lookup_uid(self, username: str) -> int | None:
        """Return the numeric UID of *username*, or ``None`` if unknown.

        An unknown user is a normal outcome, not an error.
        """
        ...  # pragma: no cover


class ServiceManager(Protocol):
    """Contract for service-manager backends (e.g. ``systemctl``).

    Implementations must map all backend-specific exceptions to
    :class:`~limit_users_cpu.exceptions.CpuQuotaError` subclasses.
    """

    def render_set_property(self, unit: str, name: str, value: str) -> str:
        """Return the command line :meth:`set_property` would run.

        Used for dry-run and verbose output; must not execute anything.
        """
        ...  # pragma: no cover

    def set_property(self, unit: str, name: str, value: str) -> None:
        """Set property *name* of *unit* to *value*.

        An empty *value* resets the property to its default.

        Raises
        ------
        CommandFailedError
            When the backend reports failure.
        """
        ...  # pragma: no cover

    def get_property(self, unit: str, name: str) -> str:
        """Return the current value of property *name* of *unit*.

        Raises
        ------
        CommandFailedError
            When the backend reports failure.
        """
        ...  # pragma: no cover
