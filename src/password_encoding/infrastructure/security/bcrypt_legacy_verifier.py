"""Bcrypt verifier adapter for hashes produced before the Argon2 migration."""

from __future__ import annotations

import bcrypt

from password_encoding.application.ports.legacy_verifier_port import LegacyVerifierPort
from password_encoding.domain.credentials import Credential


class BcryptLegacyVerifier(LegacyVerifierPort):
    """Legacy password verification adapter using bcrypt."""

    def verify_password(self, *, password: Credential, password_hash: str) -> bool:
        encoded = password if isinstance(password, bytes) else password.encode("utf-8")
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except ValueError:
            return False
