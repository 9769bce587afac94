"""Root pytest configuration.

Test Structure:
    tests/
    └── unit/                  # Fast, isolated tests
        ├── config/            # Settings loading
        ├── domain/            # IBAN domain (registry, checksum, value object)
        └── presentation/      # CLI commands
"""

import pytest

from ibanscope_config import clear_settings_cache


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Run every test against default settings.

    Drops IBANSCOPE_* variables from the environment and clears the cached
    settings before and after each test.
    """
    monkeypatch.delenv("IBANSCOPE_LOG_LEVEL", raising=False)
    monkeypatch.delenv("IBANSCOPE_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("IBANSCOPE_APP_NAME", raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()
