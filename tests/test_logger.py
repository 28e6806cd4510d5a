"""Tests for logging setup."""

import logging

import pytest

from utils.logger import configure_logging, get_logger


def test_get_logger_returns_named_logger():
    logger = get_logger("postbook.test")
    assert logger.name == "postbook.test"


def test_handler_installed_once():
    get_logger("a")
    get_logger("b")
    root = logging.getLogger()
    formatted = [h for h in root.handlers if h.formatter and " | %(name)s | " in (h.formatter._fmt or "")]
    assert len(formatted) == 1


def test_configure_logging_sets_level():
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)


def test_configure_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        configure_logging("chatty")
