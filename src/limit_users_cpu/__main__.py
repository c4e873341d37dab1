"""Allow ``python -m limit_users_cpu`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m limit_users_cpu`` behaves identically to the
``limit-users-cpu`` console script.
"""

from __future__ import annotations

from limit_users_cpu.cli.app import cli

if __name__ == "__main__":
    cli()
