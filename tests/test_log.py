"""Tests for diagnostic logging setup."""

import logging

from rich.logging import RichHandler

from setupcheck.log import LOG_LEVEL_ENV, configure_logging


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "debug")
    assert configure_logging() == logging.DEBUG
    assert logging.getLogger("setupcheck").level == logging.DEBUG


def test_unknown_level_falls_back_to_warning(monkeypatch):
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    assert configure_logging("chatty") == logging.WARNING


def test_handler_installed_once():
    configure_logging("info")
    configure_logging("info")

    handlers = [h for h in logging.getLogger("setupcheck").handlers if isinstance(h, RichHandler)]
    assert len(handlers) == 1
