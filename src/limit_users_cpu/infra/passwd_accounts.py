"""Account database adapter backed by :mod:`pwd`.

Implements :class:`~limit_users_cpu.core.protocols.AccountDatabase`
by reading the same passwd database that ``getent passwd`` queries
(local files, LDAP, SSSD — whatever NSS is configured with).
"""

from __future__ import annotations

import pwd


class PasswdAccountDatabase:
    """Concrete :class:`AccountDatabase` over the NSS passwd database."""

    def lookup_uid(self, username: str) -> int | None:
        """Return the UID of *username*, or ``None`` when it does not exist."""
        if not username:
            return None
        try:
            entry = pwd.getpwnam(username)
        except KeyError:
            return None
        return entry.pw_uid
