"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.

A failing ``systemctl`` command is the one exception: its own exit
status is propagated unchanged.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error, or help was shown."""

GENERAL_ERROR: int = 1
"""A known CpuQuotaError was caught. User-facing message was displayed."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

USAGE_ERROR: int = 64
"""Malformed command line.  Matches ``EX_USAGE`` from ``sysexits.h``."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
