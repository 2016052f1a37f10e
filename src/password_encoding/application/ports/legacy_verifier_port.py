"""Port for verifying credentials against legacy bcrypt hashes."""

from __future__ import annotations

from typing import Protocol

from password_encoding.domain.credentials import Credential


class LegacyVerifierPort(Protocol):
    """Legacy hash verification contract."""

    def verify_password(self, *, password: Credential, password_hash: str) -> bool:
        """Verify plaintext password against one legacy stored hash."""
