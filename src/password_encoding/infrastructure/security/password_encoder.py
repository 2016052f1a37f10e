"""Argon2id password encoder with bcrypt migration support."""

from __future__ import annotations

import logging

from password_encoding.application.ports.hashing_backend_port import HashingBackend
from password_encoding.application.ports.legacy_verifier_port import LegacyVerifierPort
from password_encoding.application.ports.password_encoder_port import PasswordEncoderPort
from password_encoding.domain.cost_parameters import CostParameters, resolve_cost_parameters
from password_encoding.domain.credentials import (
    Credential,
    is_encodable,
    is_legacy_candidate,
    is_oversized,
)
from password_encoding.domain.errors import (
    BackendNotSupportedError,
    InvalidCredentialError,
    UnsupportedEnvironmentError,
)
from password_encoding.infrastructure.security.bcrypt_legacy_verifier import (
    BcryptLegacyVerifier,
)
from password_encoding.infrastructure.security.capabilities import (
    is_hashing_supported,
    resolve_hashing_backend,
)

logger = logging.getLogger(__name__)


class Argon2PasswordEncoder(PasswordEncoderPort):
    """Hash passwords with Argon2id and keep verifying legacy bcrypt hashes.

    The encoder is immutable after construction and safe to share between
    threads. Salts are generated by the backend, so the ``salt`` arguments are
    accepted only for interface compatibility and ignored.
    """

    def __init__(
        self,
        ops_limit: int | None = None,
        mem_limit: int | None = None,
        *,
        backend: HashingBackend | None = None,
        legacy_verifier: LegacyVerifierPort | None = None,
    ) -> None:
        resolved = backend if backend is not None else resolve_hashing_backend()
        if resolved is None:
            raise BackendNotSupportedError()

        self._backend = resolved
        self._legacy_verifier = legacy_verifier or BcryptLegacyVerifier()
        self._cost = resolve_cost_parameters(
            ops_limit=ops_limit,
            mem_limit=mem_limit,
            recommended_ops_limit=resolved.recommended_ops_limit,
            recommended_mem_limit=resolved.recommended_mem_limit,
        )
        logger.info(
            "password_encoder_configured backend=%s ops_limit=%s mem_limit=%s",
            resolved.name,
            self._cost.ops_limit,
            self._cost.mem_limit,
        )

    @classmethod
    def is_supported(cls) -> bool:
        """Return whether an Argon2 backend is available without building an encoder."""

        return is_hashing_supported()

    @property
    def cost(self) -> CostParameters:
        return self._cost

    @property
    def ops_limit(self) -> int:
        return self._cost.ops_limit

    @property
    def mem_limit(self) -> int:
        return self._cost.mem_limit

    @property
    def backend_name(self) -> str:
        return self._backend.name

    def encode_password(self, raw: Credential, salt: str | None = None) -> str:
        """Hash one plaintext, refusing oversized or unencodable input with a generic error."""

        _ = salt
        if is_oversized(raw) or not is_encodable(raw):
            raise InvalidCredentialError()

        hash_operation = self._backend.hash
        if hash_operation is None:
            self._log_missing_operation("hash")
            raise UnsupportedEnvironmentError(operation="hash")
        return hash_operation(raw, self._cost.ops_limit, self._cost.mem_limit)

    def is_password_valid(self, encoded: str, raw: Credential, salt: str | None = None) -> bool:
        """Verify one plaintext, returning False instead of raising for bad input."""

        _ = salt
        if is_oversized(raw) or not is_encodable(raw):
            return False

        if is_legacy_candidate(encoded=encoded, raw=raw):
            logger.debug("password_verification_path path=legacy_bcrypt")
            return self._legacy_verifier.verify_password(password=raw, password_hash=encoded)

        verify_operation = self._backend.verify
        if verify_operation is None:
            self._log_missing_operation("verify")
            raise UnsupportedEnvironmentError(operation="verify")
        return verify_operation(encoded, raw)

    def needs_rehash(self, encoded: str) -> bool:
        """Return whether the stored hash was built with different cost parameters."""

        needs_rehash_operation = self._backend.needs_rehash
        if needs_rehash_operation is None:
            self._log_missing_operation("needs_rehash")
            raise UnsupportedEnvironmentError(operation="needs_rehash")
        return needs_rehash_operation(encoded, self._cost.ops_limit, self._cost.mem_limit)

    def _log_missing_operation(self, operation: str) -> None:
        logger.warning(
            "hashing_operation_missing backend=%s operation=%s",
            self._backend.name,
            operation,
        )
