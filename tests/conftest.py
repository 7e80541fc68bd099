"""Shared fixtures for SSH resource tests."""

from collections.abc import Callable
from unittest.mock import MagicMock

import pytest

from tests.fakes import make_connection, make_process


@pytest.fixture
def fake_process() -> Callable[..., MagicMock]:
    """Factory for fake remote processes."""
    return make_process


@pytest.fixture
def fake_connection() -> Callable[..., MagicMock]:
    """Factory for fake SSH connections."""
    return make_connection
