"""Unit tests for render_engine.config."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from render_engine.config import Dialect, Settings, load_settings

# ---------------------------------------------------------------------------
# Settings - default values
# ---------------------------------------------------------------------------


class TestSettingsDefaults:
    def test_default_dialect(self):
        assert Settings(_env_file=None).dialect == Dialect.MYSQL

    def test_default_debug(self):
        assert Settings(_env_file=None).debug is False

    def test_default_nesting_depth(self):
        assert Settings(_env_file=None).max_nesting_depth == 64

    def test_default_not_strict(self):
        assert Settings(_env_file=None).strict_keywords is False


# ---------------------------------------------------------------------------
# Environment variable overrides
# ---------------------------------------------------------------------------


class TestSettingsEnvOverrides:
    def test_env_var_overrides_dialect(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STMTRENDER_DIALECT", "postgres")
        assert Settings(_env_file=None).dialect == Dialect.POSTGRES

    def test_env_var_overrides_strict(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STMTRENDER_STRICT_KEYWORDS", "true")
        assert Settings(_env_file=None).strict_keywords is True

    def test_env_var_overrides_depth(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STMTRENDER_MAX_NESTING_DEPTH", "8")
        assert Settings(_env_file=None).max_nesting_depth == 8

    def test_unknown_dialect_rejected(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("STMTRENDER_DIALECT", "cobol")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestSettingsValidation:
    @pytest.mark.parametrize("depth", [0, -1])
    def test_depth_must_be_positive(self, depth):
        with pytest.raises(ValidationError):
            Settings(_env_file=None, max_nesting_depth=depth)

    def test_depth_of_one_allowed(self):
        assert Settings(_env_file=None, max_nesting_depth=1).max_nesting_depth == 1


# ---------------------------------------------------------------------------
# load_settings
# ---------------------------------------------------------------------------


class TestLoadSettings:
    def test_overrides(self):
        settings = load_settings(_env_file=None, dialect="tsql")
        assert settings.dialect == Dialect.TSQL

    def test_debug_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="render_engine.config"):
            load_settings(_env_file=None, debug=True)
        assert "dialect=mysql" in caplog.text

    def test_quiet_without_debug(self, caplog):
        with caplog.at_level(logging.INFO, logger="render_engine.config"):
            load_settings(_env_file=None)
        assert caplog.text == ""
