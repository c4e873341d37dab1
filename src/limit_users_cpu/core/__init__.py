"""Core / service layer — pure business logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No subprocess or account-database access.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from limit_users_cpu.core.models import Invocation, Mode, QuotaChange, QuotaReading, UserSlice
from limit_users_cpu.core.protocols import AccountDatabase, ServiceManager
from limit_users_cpu.core.quota_service import QuotaService

__all__: list[str] = [
    "AccountDatabase",
    "Invocation",
    "Mode",
    "QuotaChange",
    "QuotaReading",
    "QuotaService",
    "ServiceManager",
    "UserSlice",
]
