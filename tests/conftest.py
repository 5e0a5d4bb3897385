"""Pytest fixtures for pyemitter tests."""

from unittest.mock import Mock

import pytest

from pyemitter.lib import emitter
from pyemitter.lib.emitter import Registry


@pytest.fixture
def registry():
    """Create an empty Registry."""
    return Registry()


@pytest.fixture
def default_registry(monkeypatch):
    """Replace the process-wide registry with a fresh one for the test."""
    monkeypatch.setattr(emitter, "_default_registry", None)
    return emitter.get_default_registry()


@pytest.fixture
def listener():
    return Mock(name="listener")


@pytest.fixture
def listener2():
    return Mock(name="listener2")
