"""Length bounds and format signatures for plaintext credentials and stored hashes."""

from __future__ import annotations

MAX_PASSWORD_LENGTH = 4096
LEGACY_MAX_PASSWORD_LENGTH = 72
LEGACY_HASH_PREFIX = "$2"

Credential = str | bytes


def credential_length(raw: Credential) -> int:
    """Return the credential length in bytes, UTF-8 encoding text input."""

    if isinstance(raw, bytes):
        return len(raw)
    # Lone surrogates are counted as their raw code units instead of raising.
    return len(raw.encode("utf-8", "surrogatepass"))


def is_encodable(raw: Credential) -> bool:
    """Return whether one plaintext can be handed to a hashing library as UTF-8."""

    if isinstance(raw, bytes):
        return True
    try:
        raw.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def is_oversized(raw: Credential) -> bool:
    """Return whether one plaintext exceeds the maximum accepted length."""

    return credential_length(raw) > MAX_PASSWORD_LENGTH


def is_legacy_hash(encoded: str) -> bool:
    """Return whether one stored hash carries the bcrypt-family signature."""

    return encoded.startswith(LEGACY_HASH_PREFIX)


def is_legacy_candidate(*, encoded: str, raw: Credential) -> bool:
    """Return whether verification should go through the legacy bcrypt path.

    bcrypt only ever consumed the first 72 bytes of a password, so longer
    plaintexts cannot have produced a legacy hash that should match.
    """

    return credential_length(raw) <= LEGACY_MAX_PASSWORD_LENGTH and is_legacy_hash(encoded)
