"""Shared fixtures for mmake tests."""

from __future__ import annotations

import pytest


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run the test from inside tmp_path so rule names are relative paths."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
