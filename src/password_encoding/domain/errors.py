"""Error taxonomy for password encoding policy failures."""

from __future__ import annotations


class PasswordEncodingError(Exception):
    """Base class for all password encoding failures."""


class ConfigurationError(PasswordEncodingError, ValueError):
    """Raised when an encoder cannot be built from the given configuration."""


class UnsupportedEnvironmentError(PasswordEncodingError, RuntimeError):
    """Raised when a required hashing operation is missing at call time."""

    def __init__(self, *, operation: str) -> None:
        super().__init__(f"hashing operation unavailable in this environment: {operation}")
        self.operation = operation


class BackendNotSupportedError(ConfigurationError, UnsupportedEnvironmentError):
    """Raised at construction when no Argon2 backend is available at all."""

    def __init__(self) -> None:
        PasswordEncodingError.__init__(
            self,
            "Argon2 hashing is not available. Install argon2-cffi "
            "(or passlib with an argon2 backend) or use a different encoder.",
        )
        self.operation = "argon2"


class InvalidCredentialError(PasswordEncodingError, ValueError):
    """Raised when a plaintext credential cannot be encoded.

    The message is intentionally generic so callers that surface it do not
    disclose why the credential was refused.
    """

    def __init__(self) -> None:
        super().__init__("Invalid password.")
