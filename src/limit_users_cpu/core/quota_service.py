"""Core quota service — resolves users and drives the service manager.

This is the central service class consumed by the CLI layer.  It
depends on an :class:`~limit_users_cpu.core.protocols.AccountDatabase`
and a :class:`~limit_users_cpu.core.protocols.ServiceManager` injected at
construction time (dependency inversion), keeping the core free of any
OS imports.

Per-user outcomes are reported through callbacks as they happen, so the
caller's output stays in processing order even when a later user aborts
the run.

Guarantees
----------
* Pure orchestration — no ``print()``, no subprocess, no ``pwd``.
* Users are processed strictly in order, one at a time.
* Unknown users are reported via ``on_missing`` and skipped.
* A failing service-manager command propagates immediately.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from limit_users_cpu.core.models import QuotaChange, QuotaReading, UserSlice
from limit_users_cpu.core.protocols import AccountDatabase, ServiceManager
from limit_users_cpu.core.quota import format_quota_percent, normalize_quota
from limit_users_cpu.exceptions import CpuQuotaError, QuotaFormatError, ServiceManagerError

CPU_QUOTA_PROPERTY: str = "CPUQuota"
CPU_QUOTA_PER_SEC_PROPERTY: str = "CPUQuotaPerSecUSec"


class QuotaService:
    """Stateless service that sets, removes, and reports CPU quotas.

    Parameters
    ----------
    service_manager:
        Any object satisfying the :class:`ServiceManager` protocol.
    accounts:
        Any object satisfying the :class:`AccountDatabase` protocol.
    """

    def __init__(
        self,
        service_manager: ServiceManager,
        accounts: AccountDatabase,
    ) -> None:
        self._service_manager: ServiceManager = service_manager
        self._accounts: AccountDatabase = accounts

    # ------------------------------------------------------------------
    # Resolution
    # ------------------------------------------------------------------

    def resolve(self, username: str) -> UserSlice | None:
        """Resolve *username* to its slice, or ``None`` if it does not exist."""
        uid = self._accounts.lookup_uid(username)
        if uid is None:
            return None
        return UserSlice(username=username, uid=uid)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def apply_quota(
        self,
        quota: str,
        users: Iterable[str],
        *,
        dry_run: bool = False,
        on_change: Callable[[QuotaChange], None] | None = None,
        on_missing: Callable[[str], None] | None = None,
    ) -> list[QuotaChange]:
        """Set (or, for an empty *quota*, remove) the CPU quota of each user.

        *on_change* is called before each command runs.  In dry-run mode
        nothing is executed.

        Returns
        -------
        list[QuotaChange]
            One entry per resolved user, in order.

        Raises
        ------
        CommandFailedError
            As soon as one ``set-property`` call fails.  Users already
            processed keep their new quota.
        """
        value = normalize_quota(quota)
        changes: list[QuotaChange] = []

        for username in users:
            user = self.resolve(username)
            if user is None:
                if on_missing is not None:
                    on_missing(username)
                continue

            change = QuotaChange(
                user=user,
                quota=value,
                command=self._service_manager.render_set_property(
                    user.slice_name, CPU_QUOTA_PROPERTY, value,
                ),
                dry_run=dry_run,
            )
            if on_change is not None:
                on_change(change)
            if not dry_run:
                self._set(user.slice_name, value)
            changes.append(change)

        return changes

    def show_quota(
        self,
        users: Iterable[str],
        *,
        on_reading: Callable[[QuotaReading], None] | None = None,
        on_missing: Callable[[str], None] | None = None,
    ) -> list[QuotaReading]:
        """Report the effective CPU quota of each user's slice.

        Values that cannot be converted to a percentage are reported
        verbatim instead of failing the run.
        """
        readings: list[QuotaReading] = []

        for username in users:
            user = self.resolve(username)
            if user is None:
                if on_missing is not None:
                    on_missing(username)
                continue

            raw = self._get(user.slice_name, CPU_QUOTA_PER_SEC_PROPERTY)
            try:
                display = format_quota_percent(raw)
            except QuotaFormatError:
                display = raw.strip()

            reading = QuotaReading(user=user, raw=raw, display=display)
            if on_reading is not None:
                on_reading(reading)
            readings.append(reading)

        return readings

    # ------------------------------------------------------------------
    # Provider delegation (safe boundary)
    # ------------------------------------------------------------------

    def _set(self, unit: str, value: str) -> None:
        """Call the service manager and ensure only our exceptions escape."""
        try:
            self._service_manager.set_property(unit, CPU_QUOTA_PROPERTY, value)
        except CpuQuotaError:
            raise
        except Exception as exc:
            raise ServiceManagerError(
                f"Unexpected service manager error: {exc}",
            ) from exc

    def _get(self, unit: str, name: str) -> str:
        try:
            return self._service_manager.get_property(unit, name)
        except CpuQuotaError:
            raise
        except Exception as exc:
            raise ServiceManagerError(
                f"Unexpected service manager error: {exc}",
            ) from exc
