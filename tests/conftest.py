"""Pytest configuration and shared fixtures for clockify-bulk tests."""

from pathlib import Path

import pytest
from _pytest.config import Config


def pytest_configure(config: Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "slow: Slow running tests")


@pytest.fixture
def isolated_home(tmp_path: Path, monkeypatch) -> Path:
    """Set up isolated HOME environment for testing.

    This fixture ensures that HOME is set to a temp directory and that
    XDG_CONFIG_HOME and XDG_CACHE_HOME are unset to avoid interference
    from the CI environment or user's real directories.
    This is critical for tests that rely on default path resolution.

    Returns:
        Path: The temporary home directory
    """
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.delenv("XDG_CACHE_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path
