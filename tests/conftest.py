"""Shared pytest configuration and fixtures for all tests."""

import json
from pathlib import Path

import pytest

from linkinfo.api.link.file_type_registry import set_file_types


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: unit tests")
    config.addinivalue_line("markers", "link: link model tests")
    config.addinivalue_line("markers", "config: configuration tests")
    config.addinivalue_line("markers", "cli: command line tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Return a minimal valid configuration dict."""
    return {
        "extensions": {
            "markdown_extensions": ["md", "markdown"],
            "wiki_page_extensions": ["md"],
        },
        "log": {"level": "INFO"},
    }


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict()


@pytest.fixture
def linkinfo_home(tmp_path: Path, monkeypatch) -> Path:
    """Point LINKINFO_HOME at an empty temporary directory.

    Returns:
        Path to the home directory (tmp_path)
    """
    monkeypatch.setenv("LINKINFO_HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def linkinfo_home_with_config(linkinfo_home: Path, minimal_config_dict: dict) -> Path:
    """Set up LINKINFO_HOME with a minimal config file."""
    (linkinfo_home / "config.json").write_text(json.dumps(minimal_config_dict))
    return linkinfo_home


@pytest.fixture(autouse=True)
def reset_file_types():
    """Restore the default file types after every test."""
    yield
    set_file_types(None)


def _run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


@pytest.fixture
def run_cmd():
    """Return a helper that runs a cmd function to completion."""
    return _run_cmd
