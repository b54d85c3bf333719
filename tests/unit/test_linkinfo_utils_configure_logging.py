"""Unit tests for linkinfo.utils.configure_logging module."""

import importlib
import logging
from logging.handlers import RotatingFileHandler

import pytest

from linkinfo.utils.configure_logging import configure_logging

configure_logging_module = importlib.import_module("linkinfo.utils.configure_logging")


@pytest.fixture
def fresh_logging(monkeypatch):
    monkeypatch.setattr(configure_logging_module, "_CONFIGURED", False)
    root_logger = logging.getLogger("linkinfo")
    level = root_logger.level
    yield root_logger
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(level)


def test_configure_logging_writes_file(tmp_path, fresh_logging):
    """Test a rotating file handler is installed under the home directory."""
    home = tmp_path / "home"
    configure_logging(home, "DEBUG")

    handlers = [h for h in fresh_logging.handlers if isinstance(h, RotatingFileHandler)]
    assert len(handlers) == 1
    assert fresh_logging.level == logging.DEBUG

    logging.getLogger("linkinfo.test").debug("hello")
    handlers[0].flush()
    assert "linkinfo.test - DEBUG - hello" in (home / "linkinfo.log").read_text()


def test_configure_logging_once(tmp_path, fresh_logging):
    """Test repeated calls do not add handlers."""
    configure_logging(tmp_path)
    configure_logging(tmp_path)

    assert len(fresh_logging.handlers) == 1


def test_configure_logging_from_env(tmp_path, monkeypatch, fresh_logging):
    """Test the home directory defaults to LINKINFO_HOME."""
    monkeypatch.setenv("LINKINFO_HOME", str(tmp_path))
    configure_logging()

    assert (tmp_path / "linkinfo.log").exists()


def test_configure_logging_uses_get_home_dir(tmp_path, monkeypatch, fresh_logging):
    """Test the default home directory comes from get_home_dir()."""
    monkeypatch.setattr(configure_logging_module, "get_home_dir", lambda: tmp_path / "resolved")
    configure_logging()

    assert (tmp_path / "resolved" / "linkinfo.log").exists()
