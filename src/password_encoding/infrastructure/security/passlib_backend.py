"""Compatibility Argon2id backend routed through passlib."""

from __future__ import annotations

from functools import lru_cache

from passlib.context import CryptContext
from passlib.hash import argon2 as passlib_argon2

from password_encoding.application.ports.hashing_backend_port import HashingBackend
from password_encoding.domain.credentials import Credential

BACKEND_NAME = "passlib"
_VERIFY_CONTEXT = CryptContext(schemes=["argon2"])


def is_available() -> bool:
    """Ask passlib whether any argon2 backend can actually run."""

    return bool(passlib_argon2.has_backend())


@lru_cache(maxsize=32)
def _context(ops_limit: int, mem_limit: int) -> CryptContext:
    return CryptContext(
        schemes=["argon2"],
        argon2__type="ID",
        argon2__rounds=ops_limit,
        # passlib only flags rounds outside these bounds as needing an update.
        argon2__min_rounds=ops_limit,
        argon2__max_rounds=ops_limit,
        argon2__memory_cost=mem_limit // 1024,
        argon2__parallelism=1,
        argon2__salt_size=16,
        argon2__digest_size=32,
    )


def hash_password(password: Credential, ops_limit: int, mem_limit: int) -> str:
    """Hash one plaintext through passlib with a fresh embedded salt."""

    return _context(ops_limit, mem_limit).hash(password)


def verify_password(encoded: str, password: Credential) -> bool:
    """Verify one plaintext, treating hashes passlib cannot identify as mismatches."""

    try:
        return bool(_VERIFY_CONTEXT.verify(password, encoded))
    except ValueError:
        return False


def needs_rehash(encoded: str, ops_limit: int, mem_limit: int) -> bool:
    """Return whether passlib flags the stored hash as built with other parameters."""

    try:
        return bool(_context(ops_limit, mem_limit).needs_update(encoded))
    except ValueError:
        return True


def build_passlib_backend() -> HashingBackend:
    """Describe passlib's argon2 handler as a hashing backend."""

    default_memory_cost = getattr(passlib_argon2, "memory_cost", None)
    return HashingBackend(
        name=BACKEND_NAME,
        hash=hash_password,
        verify=verify_password,
        needs_rehash=needs_rehash,
        recommended_ops_limit=getattr(passlib_argon2, "default_rounds", None),
        recommended_mem_limit=(
            default_memory_cost * 1024 if default_memory_cost is not None else None
        ),
    )
