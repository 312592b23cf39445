"""
Pytest configuration and shared fixtures for vsfinder tests.
"""

import logging

import pytest

# Import test fixtures to make them available to all tests
# ruff: noqa: F401
from tests.fixtures.installations import (
    empty_fs,
    vs2017,
    vs2019,
    vs2022,
    vs2022_fs,
)


@pytest.fixture(autouse=True)
def clear_vcinstalldir(monkeypatch):
    """Keep a real VS Command Prompt from leaking into tests."""
    monkeypatch.delenv("VCINSTALLDIR", raising=False)


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo logging.basicConfig(force=True) calls made by CLI tests."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
