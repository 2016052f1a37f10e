"""Port for encoding, verifying and re-evaluating stored password hashes."""

from __future__ import annotations

from typing import Protocol

from password_encoding.domain.credentials import Credential


class PasswordEncoderPort(Protocol):
    """Password encoding contract exposed to authentication callers."""

    def encode_password(self, raw: Credential, salt: str | None = None) -> str:
        """Encode plaintext password for storage."""

    def is_password_valid(self, encoded: str, raw: Credential, salt: str | None = None) -> bool:
        """Verify plaintext password against stored hash."""

    def needs_rehash(self, encoded: str) -> bool:
        """Return whether stored hash should be regenerated."""
