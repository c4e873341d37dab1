"""systemctl backed implementation of :class:`~limit_users_cpu.core.protocols.ServiceManager`.

This module is the **only** place in the codebase that spawns
``systemctl``.  Non-zero exits are re-raised as
:class:`~limit_users_cpu.exceptions.CommandFailedError` and spawn
failures as :class:`~limit_users_cpu.exceptions.ServiceManagerError`.
"""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Sequence

from limit_users_cpu.exceptions import CommandFailedError, ServiceManagerError
from limit_users_cpu.infra.systemctl_detector import SYSTEMCTL


class SystemctlServiceManager:
    """Concrete :class:`ServiceManager` that shells out to ``systemctl``.

    This class satisfies the :class:`~limit_users_cpu.core.protocols.ServiceManager`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    executable:
        Name or path of the systemctl binary.
    """

    def __init__(self, executable: str = SYSTEMCTL) -> None:
        self._executable: str = executable

    # ------------------------------------------------------------------
    # Command construction (pure)
    # ------------------------------------------------------------------

    def set_property_argv(self, unit: str, name: str, value: str) -> list[str]:
        """Return the argv for ``systemctl set-property <unit> <name>=<value>``."""
        return [self._executable, "set-property", unit, f"{name}={value}"]

    def show_property_argv(self, unit: str, name: str) -> list[str]:
        """Return the argv for ``systemctl show --property=<name> --value <unit>``."""
        return [self._executable, "show", f"--property={name}", "--value", unit]

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def render_set_property(self, unit: str, name: str, value: str) -> str:
        return shlex.join(self.set_property_argv(unit, name, value))

    def set_property(self, unit: str, name: str, value: str) -> None:
        """Apply ``<name>=<value>`` to *unit*; an empty value resets it.

        Output of systemctl is not captured, so its own diagnostics reach
        the terminal directly.

        Raises
        ------
        CommandFailedError
            When systemctl exits non-zero.
        """
        self._run(self.set_property_argv(unit, name, value), capture=False)

    def get_property(self, unit: str, name: str) -> str:
        """Return the value of property *name* of *unit*, whitespace-stripped.

        Raises
        ------
        CommandFailedError
            When systemctl exits non-zero.
        """
        return self._run(self.show_property_argv(unit, name), capture=True).strip()

    # ------------------------------------------------------------------
    # Subprocess boundary
    # ------------------------------------------------------------------

    @staticmethod
    def _run(argv: Sequence[str], *, capture: bool) -> str:
        try:
            completed = subprocess.run(
                list(argv),
                check=False,
                capture_output=capture,
                text=True,
            )
        except OSError as exc:
            raise ServiceManagerError(
                f"Could not run {argv[0]}: {exc}",
                hint="Check that systemd is installed and you have permission to run it.",
            ) from exc

        if completed.returncode != 0:
            raise CommandFailedError(
                argv,
                completed.returncode,
                stderr=completed.stderr or "",
            )
        return completed.stdout or ""
