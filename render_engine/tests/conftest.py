"""Shared fixtures for render engine tests."""

from __future__ import annotations

import pytest

from render_engine.config import Settings
from render_engine.renderer import RenderContext, build_context, reset_renderer


@pytest.fixture(autouse=True)
def _reset_fragment_renderer():
    """Ensure each test gets a fresh fragment renderer (singleton safety)."""
    reset_renderer()
    yield
    reset_renderer()


@pytest.fixture()
def settings() -> Settings:
    """Default settings, independent of the caller's environment."""
    return Settings(_env_file=None)


@pytest.fixture()
def ctx(settings: Settings) -> RenderContext:
    """A depth-0 render context using the default (MySQL) fragments."""
    return build_context(settings)


@pytest.fixture()
def strict_ctx() -> RenderContext:
    """A render context that raises on unsupported object keywords."""
    return build_context(Settings(_env_file=None, strict_keywords=True))
