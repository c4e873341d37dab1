"""Tests for the systemctl adapter (infra/systemctl_service_manager.py).

:func:`subprocess.run` is mocked at the infra boundary — systemctl is
never spawned.
"""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from limit_users_cpu.exceptions import CommandFailedError, ServiceManagerError
from limit_users_cpu.infra.systemctl_service_manager import SystemctlServiceManager

_RUN = "limit_users_cpu.infra.systemctl_service_manager.subprocess.run"


def _completed(
    returncode: int = 0, stdout: str | None = "", stderr: str | None = "",
) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(
        args=[], returncode=returncode, stdout=stdout, stderr=stderr,
    )


# ---------------------------------------------------------------------------
# Command construction (pure)
# ---------------------------------------------------------------------------

class TestCommandConstruction:
    def test_set_property_argv(self) -> None:
        argv = SystemctlServiceManager().set_property_argv(
            "user-1000.slice", "CPUQuota", "10%",
        )
        assert argv == ["systemctl", "set-property", "user-1000.slice", "CPUQuota=10%"]

    def test_set_property_argv_empty_value(self) -> None:
        argv = SystemctlServiceManager().set_property_argv("user-1000.slice", "CPUQuota", "")
        assert argv[-1] == "CPUQuota="

    def test_show_property_argv(self) -> None:
        argv = SystemctlServiceManager().show_property_argv(
            "user-1000.slice", "CPUQuotaPerSecUSec",
        )
        assert argv == [
            "systemctl",
            "show",
            "--property=CPUQuotaPerSecUSec",
            "--value",
            "user-1000.slice",
        ]

    def test_custom_executable(self) -> None:
        argv = SystemctlServiceManager("/bin/systemctl").set_property_argv("u", "CPUQuota", "")
        assert argv[0] == "/bin/systemctl"

    def test_render_set_property(self) -> None:
        rendered = SystemctlServiceManager().render_set_property(
            "user-1000.slice", "CPUQuota", "10%",
        )
        assert rendered == "systemctl set-property user-1000.slice CPUQuota=10%"

    def test_render_removal(self) -> None:
        rendered = SystemctlServiceManager().render_set_property(
            "user-1000.slice", "CPUQuota", "",
        )
        assert rendered == "systemctl set-property user-1000.slice CPUQuota="


# ---------------------------------------------------------------------------
# set_property
# ---------------------------------------------------------------------------

class TestSetProperty:
    def test_runs_systemctl(self) -> None:
        with patch(_RUN, return_value=_completed()) as mock_run:
            SystemctlServiceManager().set_property("user-1000.slice", "CPUQuota", "10%")

        mock_run.assert_called_once_with(
            ["systemctl", "set-property", "user-1000.slice", "CPUQuota=10%"],
            check=False,
            capture_output=False,
            text=True,
        )

    def test_non_zero_exit_raises_with_returncode(self) -> None:
        with patch(_RUN, return_value=_completed(returncode=1, stderr=None)):
            with pytest.raises(CommandFailedError) as exc_info:
                SystemctlServiceManager().set_property("user-1000.slice", "CPUQuota", "10%")

        assert exc_info.value.returncode == 1
        assert exc_info.value.command[1] == "set-property"

    def test_spawn_failure_is_wrapped(self) -> None:
        with patch(_RUN, side_effect=PermissionError("denied")):
            with pytest.raises(ServiceManagerError, match="Could not run systemctl"):
                SystemctlServiceManager().set_property("user-1000.slice", "CPUQuota", "10%")


# ---------------------------------------------------------------------------
# get_property
# ---------------------------------------------------------------------------

class TestGetProperty:
    def test_returns_stripped_stdout(self) -> None:
        with patch(_RUN, return_value=_completed(stdout="500ms\n")) as mock_run:
            value = SystemctlServiceManager().get_property(
                "user-1000.slice", "CPUQuotaPerSecUSec",
            )

        assert value == "500ms"
        assert mock_run.call_args.kwargs["capture_output"] is True

    def test_non_zero_exit_carries_stderr_hint(self) -> None:
        failed = _completed(returncode=4, stderr="Failed to connect to bus\n")
        with patch(_RUN, return_value=failed):
            with pytest.raises(CommandFailedError) as exc_info:
                SystemctlServiceManager().get_property(
                    "user-1000.slice", "CPUQuotaPerSecUSec",
                )

        assert exc_info.value.returncode == 4
        assert exc_info.value.hint == "Failed to connect to bus"
