"""Pytest configuration and fixtures."""

import os

import pytest

from procenv import env
from procenv.table import InMemoryEnvironmentTable
from tests.helpers import SEED_VARS


@pytest.fixture
def table() -> InMemoryEnvironmentTable:
    """In-memory table seeded with SEED_VARS."""
    return InMemoryEnvironmentTable(SEED_VARS)


@pytest.fixture
def empty_table() -> InMemoryEnvironmentTable:
    """In-memory table with no variables."""
    return InMemoryEnvironmentTable()


@pytest.fixture
def restore_environ():
    """Restore the real process environment after a test that mutates it.

    Tests that need an empty table should clear it in the test body, since
    pytest sets PYTEST_CURRENT_TEST between setup and call.
    """
    backup = dict(os.environ)
    try:
        yield os.environ
    finally:
        os.environ.clear()
        os.environ.update(backup)


@pytest.fixture(autouse=True)
def _reset_default_service():
    """Never leak a replaced module-level service between tests."""
    previous = env.set_default_service(None)
    yield
    env.set_default_service(previous)
