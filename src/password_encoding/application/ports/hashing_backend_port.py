"""Capability descriptor for an Argon2 hashing backend."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from password_encoding.domain.credentials import Credential

HashOperation = Callable[[Credential, int, int], str]
VerifyOperation = Callable[[str, Credential], bool]
NeedsRehashOperation = Callable[[str, int, int], bool]


@dataclass(frozen=True)
class HashingBackend:
    """Resolved hashing backend with independently optional operations.

    Memory limits are passed in bytes; each backend converts them to the unit
    its library expects.
    """

    name: str
    hash: HashOperation | None = None
    verify: VerifyOperation | None = None
    needs_rehash: NeedsRehashOperation | None = None
    recommended_ops_limit: int | None = None
    recommended_mem_limit: int | None = None

    @property
    def available_operations(self) -> tuple[str, ...]:
        """Return names of operations this backend can perform."""

        return tuple(
            operation
            for operation in ("hash", "verify", "needs_rehash")
            if getattr(self, operation) is not None
        )
