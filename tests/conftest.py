"""Shared fixtures for logtree tests."""

import pytest

from logtree import ListSink


@pytest.fixture
def sink():
    return ListSink()
