"""Shared fixtures for pi-table tests."""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep PI_TABLE_* variables from the calling shell out of the tests."""
    monkeypatch.delenv("PI_TABLE_STYLE", raising=False)
    monkeypatch.delenv("PI_TABLE_TRUNCATION_SUFFIX", raising=False)
