"""Application service verifying credentials and upgrading outdated hashes."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import StrEnum

from password_encoding.application.ports.password_encoder_port import PasswordEncoderPort
from password_encoding.domain.credentials import Credential

logger = logging.getLogger(__name__)


class CredentialCheckOutcome(StrEnum):
    """Supported credential check outcomes."""

    VALID = "valid"
    VALID_REHASHED = "valid_rehashed"
    INVALID = "invalid"


@dataclass(frozen=True)
class CredentialCheckResult:
    """Credential check result with an optional hash to persist in place of the old one."""

    outcome: CredentialCheckOutcome
    replacement_hash: str | None = None

    @property
    def is_valid(self) -> bool:
        return self.outcome is not CredentialCheckOutcome.INVALID


class CredentialCheckService:
    """Verify credentials and re-encode hashes built with outdated parameters.

    Legacy bcrypt hashes are reported as needing a rehash by the encoder, so a
    successful check against one yields an Argon2id replacement.
    """

    def __init__(self, *, password_encoder: PasswordEncoderPort) -> None:
        self._password_encoder = password_encoder

    def check(self, *, password: Credential, password_hash: str) -> CredentialCheckResult:
        """Verify one credential and return a replacement hash when an upgrade is due."""

        if not self._password_encoder.is_password_valid(password_hash, password):
            return CredentialCheckResult(outcome=CredentialCheckOutcome.INVALID)

        if not self._password_encoder.needs_rehash(password_hash):
            return CredentialCheckResult(outcome=CredentialCheckOutcome.VALID)

        replacement_hash = self._password_encoder.encode_password(password)
        logger.info("credential_hash_upgraded")
        return CredentialCheckResult(
            outcome=CredentialCheckOutcome.VALID_REHASHED,
            replacement_hash=replacement_hash,
        )

    async def check_async(
        self,
        *,
        password: Credential,
        password_hash: str,
    ) -> CredentialCheckResult:
        """Run `check` in the default executor so the event loop is not blocked."""

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None,
            lambda: self.check(password=password, password_hash=password_hash),
        )

    async def encode_async(self, *, password: Credential) -> str:
        """Encode one credential in the default executor."""

        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._password_encoder.encode_password, password)
