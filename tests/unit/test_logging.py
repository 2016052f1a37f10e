from __future__ import annotations

import logging

import pytest

from password_encoding.infrastructure.logging import configure_logging, resolve_log_level


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        ("debug", logging.DEBUG),
        (" WARNING ", logging.WARNING),
        ("", logging.INFO),
        ("not-a-level", logging.INFO),
    ],
)
def test_resolve_log_level(level: str, expected: int) -> None:
    assert resolve_log_level(level) == expected


def test_configure_logging_sets_package_logger_level() -> None:
    configure_logging(level="error")

    assert logging.getLogger("password_encoding").level == logging.ERROR
