"""Fixtures for IBAN domain tests."""

import pytest


@pytest.fixture
def german_iban() -> str:
    return "DE89370400440532013000"


@pytest.fixture
def slovak_iban_with_swift() -> str:
    """Tatra banka (bank code 1100)."""
    return "SK4311000000002626012345"
