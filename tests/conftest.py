"""Shared fixtures for the scicalc test suite."""

import logging

import pytest

from scicalc.session import Session


@pytest.fixture
def session():
    """A fresh session in RAD mode."""
    return Session()


@pytest.fixture
def deg_session():
    """A fresh session in DEG mode."""
    return Session(angle_mode="DEG")


@pytest.fixture(autouse=True)
def _reset_logging():
    """The CLI reconfigures the root logger; restore it after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
