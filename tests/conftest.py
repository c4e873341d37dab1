"""Shared pytest fixtures and configuration for the limit-users-cpu test suite.

Guidelines
----------
* No test may invoke the real ``systemctl``.
* The account database must be faked or mocked at the infra boundary.
* Core tests must be pure — no side effects.
* Tests must not depend on OS state.
"""

from __future__ import annotations

import pytest
from fakes import FakeAccounts, FakeServiceManager

from limit_users_cpu.core.quota_service import QuotaService


@pytest.fixture()
def service_manager() -> FakeServiceManager:
    return FakeServiceManager()


@pytest.fixture()
def accounts() -> FakeAccounts:
    return FakeAccounts({"alice": 1000, "bob": 1001, "carol": 1002})


@pytest.fixture()
def service(service_manager: FakeServiceManager, accounts: FakeAccounts) -> QuotaService:
    return QuotaService(service_manager, accounts)
