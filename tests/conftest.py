"""Shared pytest configuration and fixtures for all tests."""

import pytest

from urikit.api.platform.PlatformConfig import PlatformConfig
from urikit.api.platform.set_platform_config import set_platform_config


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")
    config.addinivalue_line("markers", "cli: tests that drive the Typer CLI")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """Runner for StageResult command functions."""
    return _run_cmd


@pytest.fixture(autouse=True)
def _reset_platform_config(monkeypatch):
    """Start every test from a detected platform config, and restore it after."""
    monkeypatch.delenv("URIKIT_WINDOWS_PATHS", raising=False)
    monkeypatch.delenv("URIKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("URIKIT_LOG_FILE", raising=False)
    set_platform_config(None)
    yield
    set_platform_config(None)


@pytest.fixture
def posix_platform():
    """Forward-slash host path convention."""
    set_platform_config(PlatformConfig(windows_paths=False))


@pytest.fixture
def windows_platform():
    """Backslash host path convention."""
    set_platform_config(PlatformConfig(windows_paths=True))
