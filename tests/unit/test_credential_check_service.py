from __future__ import annotations

import pytest

from password_encoding.application.services.credential_check_service import (
    CredentialCheckOutcome,
    CredentialCheckService,
)


class FakePasswordEncoder:
    def __init__(self, *, should_verify: bool, should_rehash: bool) -> None:
        self.should_verify = should_verify
        self.should_rehash = should_rehash
        self.encode_calls: list[str] = []
        self.needs_rehash_calls: list[str] = []

    def encode_password(self, raw: str, salt: str | None = None) -> str:
        _ = salt
        self.encode_calls.append(raw)
        return f"$new${raw}"

    def is_password_valid(self, encoded: str, raw: str, salt: str | None = None) -> bool:
        _ = (encoded, raw, salt)
        return self.should_verify

    def needs_rehash(self, encoded: str) -> bool:
        self.needs_rehash_calls.append(encoded)
        return self.should_rehash


def test_invalid_credential_never_checks_rehash_or_encodes() -> None:
    encoder = FakePasswordEncoder(should_verify=False, should_rehash=True)
    service = CredentialCheckService(password_encoder=encoder)

    result = service.check(password="wrong", password_hash="$old$")

    assert result.outcome is CredentialCheckOutcome.INVALID
    assert result.is_valid is False
    assert result.replacement_hash is None
    assert encoder.needs_rehash_calls == []
    assert encoder.encode_calls == []


def test_valid_current_hash_is_kept() -> None:
    encoder = FakePasswordEncoder(should_verify=True, should_rehash=False)
    service = CredentialCheckService(password_encoder=encoder)

    result = service.check(password="pw", password_hash="$current$")

    assert result.outcome is CredentialCheckOutcome.VALID
    assert result.is_valid is True
    assert result.replacement_hash is None
    assert encoder.encode_calls == []


def test_valid_outdated_hash_returns_replacement() -> None:
    encoder = FakePasswordEncoder(should_verify=True, should_rehash=True)
    service = CredentialCheckService(password_encoder=encoder)

    result = service.check(password="pw", password_hash="$2b$legacy")

    assert result.outcome is CredentialCheckOutcome.VALID_REHASHED
    assert result.is_valid is True
    assert result.replacement_hash == "$new$pw"
    assert encoder.needs_rehash_calls == ["$2b$legacy"]


@pytest.mark.asyncio
async def test_check_async_matches_sync_result() -> None:
    encoder = FakePasswordEncoder(should_verify=True, should_rehash=True)
    service = CredentialCheckService(password_encoder=encoder)

    result = await service.check_async(password="pw", password_hash="$old$")

    assert result.outcome is CredentialCheckOutcome.VALID_REHASHED
    assert result.replacement_hash == "$new$pw"


@pytest.mark.asyncio
async def test_encode_async_delegates_to_encoder() -> None:
    encoder = FakePasswordEncoder(should_verify=True, should_rehash=False)
    service = CredentialCheckService(password_encoder=encoder)

    assert await service.encode_async(password="pw") == "$new$pw"
    assert encoder.encode_calls == ["pw"]
