"""Shared pytest fixtures for wordbridge tests."""

import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from wordbridge.graph import base


@pytest.fixture(autouse=True)
def check_rep(monkeypatch):
    """Run every representation invariant check during the suite."""
    monkeypatch.setattr(base, "CHECK_REP", True)
