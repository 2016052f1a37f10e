"""Composition helpers that turn settings into a ready password encoder."""

from __future__ import annotations

from password_encoding.config.settings import Settings, load_settings
from password_encoding.infrastructure.logging import configure_logging
from password_encoding.infrastructure.security.password_encoder import Argon2PasswordEncoder


def build_password_encoder(settings: Settings | None = None) -> Argon2PasswordEncoder:
    """Build an encoder from explicit settings or the cached environment settings."""

    resolved = settings if settings is not None else load_settings()
    return Argon2PasswordEncoder(
        ops_limit=resolved.password_ops_limit,
        mem_limit=resolved.password_mem_limit,
    )


def bootstrap_password_encoder(settings: Settings | None = None) -> Argon2PasswordEncoder:
    """Configure process logging, then build the encoder."""

    resolved = settings if settings is not None else load_settings()
    configure_logging(level=resolved.log_level)
    return build_password_encoder(resolved)
