"""Shared fixtures for CLI tests."""

from __future__ import annotations

import pytest

from render_engine.renderer import reset_renderer


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch, tmp_path):
    """Keep the caller's STMTRENDER_* environment and .env file out of CLI runs."""
    for var in ("STMTRENDER_DIALECT", "STMTRENDER_STRICT_KEYWORDS", "STMTRENDER_MAX_NESTING_DEPTH", "STMTRENDER_DEBUG"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_renderer()
    yield
    reset_renderer()
