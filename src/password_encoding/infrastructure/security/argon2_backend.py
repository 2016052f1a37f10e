"""Native Argon2id hashing backend built on argon2-cffi."""

from __future__ import annotations

from functools import lru_cache

from argon2 import PasswordHasher, Type
from argon2.exceptions import InvalidHashError, VerificationError
from argon2.profiles import RFC_9106_LOW_MEMORY

from password_encoding.application.ports.hashing_backend_port import HashingBackend
from password_encoding.domain.credentials import Credential

BACKEND_NAME = "argon2-cffi"
_PARALLELISM = 1
_HASH_LENGTH = 32
_SALT_LENGTH = 16


@lru_cache(maxsize=32)
def _hasher(ops_limit: int, mem_limit: int) -> PasswordHasher:
    return PasswordHasher(
        time_cost=ops_limit,
        memory_cost=mem_limit // 1024,
        parallelism=_PARALLELISM,
        hash_len=_HASH_LENGTH,
        salt_len=_SALT_LENGTH,
        type=Type.ID,
    )


def hash_password(password: Credential, ops_limit: int, mem_limit: int) -> str:
    """Hash one plaintext with a fresh random salt embedded in the result."""

    return _hasher(ops_limit, mem_limit).hash(password)


def verify_password(encoded: str, password: Credential) -> bool:
    """Verify one plaintext using the parameters embedded in the stored hash."""

    # Verification reads every parameter from the hash; the hasher's own are unused.
    hasher = _hasher(RFC_9106_LOW_MEMORY.time_cost, RFC_9106_LOW_MEMORY.memory_cost * 1024)
    try:
        return hasher.verify(encoded, password)
    except (VerificationError, InvalidHashError, UnicodeError):
        return False


def needs_rehash(encoded: str, ops_limit: int, mem_limit: int) -> bool:
    """Return whether the stored hash parameters differ from the requested ones."""

    try:
        return _hasher(ops_limit, mem_limit).check_needs_rehash(encoded)
    except InvalidHashError:
        return True


def build_argon2_backend() -> HashingBackend:
    """Describe the argon2-cffi binding as a hashing backend."""

    return HashingBackend(
        name=BACKEND_NAME,
        hash=hash_password,
        verify=verify_password,
        needs_rehash=needs_rehash,
        recommended_ops_limit=RFC_9106_LOW_MEMORY.time_cost,
        recommended_mem_limit=RFC_9106_LOW_MEMORY.memory_cost * 1024,
    )
