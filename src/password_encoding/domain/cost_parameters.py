"""Argon2 cost parameters and their validation rules."""

from __future__ import annotations

from dataclasses import dataclass

from password_encoding.domain.errors import ConfigurationError

MIN_OPS_LIMIT = 2
MIN_MEM_LIMIT = 10 * 1024
DEFAULT_OPS_LIMIT_FLOOR = 6
# 64 MiB exactly, not the 64 * 1024 * 2014 fallback found in libsodium-based encoders.
DEFAULT_MEM_LIMIT_FLOOR = 64 * 1024 * 1024


@dataclass(frozen=True)
class CostParameters:
    """Validated operations and memory cost, memory expressed in bytes."""

    ops_limit: int
    mem_limit: int

    def __post_init__(self) -> None:
        if self.ops_limit < MIN_OPS_LIMIT:
            raise ConfigurationError(f"ops_limit must be {MIN_OPS_LIMIT} or greater")
        if self.mem_limit < MIN_MEM_LIMIT:
            raise ConfigurationError("mem_limit must be 10k or greater")


def resolve_cost_parameters(
    *,
    ops_limit: int | None,
    mem_limit: int | None,
    recommended_ops_limit: int | None = None,
    recommended_mem_limit: int | None = None,
) -> CostParameters:
    """Fill missing limits from runtime recommendations and validate the result.

    Defaults never drop below the fixed floors; explicit values are only
    checked against the hard minimums.
    """

    if ops_limit is None:
        ops_limit = max(DEFAULT_OPS_LIMIT_FLOOR, recommended_ops_limit or DEFAULT_OPS_LIMIT_FLOOR)
    if mem_limit is None:
        mem_limit = max(DEFAULT_MEM_LIMIT_FLOOR, recommended_mem_limit or DEFAULT_MEM_LIMIT_FLOOR)
    return CostParameters(ops_limit=ops_limit, mem_limit=mem_limit)
