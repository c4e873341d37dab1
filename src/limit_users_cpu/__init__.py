"""limit-users-cpu — per-user CPU quota management for systemd hosts.

Sets, removes, or reports the ``CPUQuota`` of ``user-<uid>.slice``
units through ``systemctl``, with a strict layered architecture.
"""

from limit_users_cpu.version import __version__

__all__: list[str] = ["__version__"]
