"""Runtime detection of the Argon2 hashing backend.

The native argon2-cffi binding is preferred. When it cannot be imported, passlib
is asked whether it can run argon2 itself. The outcome is resolved once per
process and never invalidated.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from password_encoding.application.ports.hashing_backend_port import HashingBackend

logger = logging.getLogger(__name__)


def _load_native_backend() -> HashingBackend | None:
    try:
        from password_encoding.infrastructure.security.argon2_backend import (
            build_argon2_backend,
        )
    except ImportError:
        return None
    return build_argon2_backend()


def _load_compat_backend() -> HashingBackend | None:
    try:
        from password_encoding.infrastructure.security import passlib_backend
    except ImportError:
        return None
    if not passlib_backend.is_available():
        return None
    return passlib_backend.build_passlib_backend()


@lru_cache(maxsize=1)
def resolve_hashing_backend() -> HashingBackend | None:
    """Return the first available hashing backend, or None when there is none."""

    for loader in (_load_native_backend, _load_compat_backend):
        backend = loader()
        if backend is not None:
            logger.info(
                "hashing_backend_resolved backend=%s operations=%s",
                backend.name,
                ",".join(backend.available_operations),
            )
            return backend
    logger.warning("hashing_backend_unavailable")
    return None


def is_hashing_supported() -> bool:
    """Return whether any Argon2 backend is available in this process."""

    return resolve_hashing_backend() is not None
