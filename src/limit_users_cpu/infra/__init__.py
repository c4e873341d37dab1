"""Infrastructure layer — external system integration.

This layer wraps all interaction with systemctl and the system account
database.  Every raw OS exception must be caught here and re-raised as
a :class:`~limit_users_cpu.exceptions.CpuQuotaError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from limit_users_cpu.infra.passwd_accounts import PasswdAccountDatabase
from limit_users_cpu.infra.systemctl_detector import (
    SystemctlStatus,
    detect_systemctl,
    require_systemctl,
)
from limit_users_cpu.infra.systemctl_service_manager import SystemctlServiceManager

__all__: list[str] = [
    "PasswdAccountDatabase",
    "SystemctlServiceManager",
    "SystemctlStatus",
    "detect_systemctl",
    "require_systemctl",
]
