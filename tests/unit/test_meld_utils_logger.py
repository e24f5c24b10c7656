"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

import pytest

from meld.utils import logger as logger_module


@pytest.fixture
def fresh_logging(monkeypatch):
    """Allow configure_logging to run again and drop any handlers it adds."""
    monkeypatch.setattr(logger_module, "_CONFIGURED", False)
    root = logging.getLogger("meld")
    before = list(root.handlers)
    yield root
    for handler in root.handlers[:]:
        if handler not in before:
            root.removeHandler(handler)
            handler.close()


def test_configure_logging_writes_under_home(tmp_path, fresh_logging):
    home = tmp_path / "home"
    logger_module.configure_logging(home)

    handlers = [h for h in fresh_logging.handlers if isinstance(h, RotatingFileHandler)]
    assert handlers
    assert handlers[-1].baseFilename == str(home / "meld.log")
    assert fresh_logging.level == logging.INFO

    logging.getLogger("meld.api.config.load_config").info("hello")
    handlers[-1].flush()
    assert "meld.api.config.load_config - INFO - hello" in (home / "meld.log").read_text()


def test_configure_logging_uses_meld_home(meld_home, fresh_logging):
    logger_module.configure_logging()
    assert (meld_home / "meld.log").exists()


def test_configure_logging_only_once(tmp_path, fresh_logging):
    logger_module.configure_logging(tmp_path)
    count = len(fresh_logging.handlers)
    logger_module.configure_logging(tmp_path / "other")
    assert len(fresh_logging.handlers) == count
