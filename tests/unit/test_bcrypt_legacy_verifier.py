from __future__ import annotations

import bcrypt

from password_encoding.infrastructure.security.bcrypt_legacy_verifier import (
    BcryptLegacyVerifier,
)


def _legacy_hash(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=4)).decode("utf-8")


def test_legacy_hash_verifies_matching_password() -> None:
    verifier = BcryptLegacyVerifier()
    password_hash = _legacy_hash("super-secret-password")

    assert verifier.verify_password(password="super-secret-password", password_hash=password_hash)


def test_wrong_password_fails_verification() -> None:
    verifier = BcryptLegacyVerifier()
    password_hash = _legacy_hash("correct")

    assert verifier.verify_password(password="wrong", password_hash=password_hash) is False


def test_bytes_password_is_accepted() -> None:
    verifier = BcryptLegacyVerifier()
    password_hash = _legacy_hash("correct")

    assert verifier.verify_password(password=b"correct", password_hash=password_hash) is True


def test_malformed_hash_fails_verification() -> None:
    verifier = BcryptLegacyVerifier()

    assert verifier.verify_password(password="correct", password_hash="$2b$broken") is False
