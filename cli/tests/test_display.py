"""Tests for cli/cli/display.py -- Rich output formatting.

Rendered output is captured via a Console writing to a StringIO buffer
rather than stderr.
"""

from __future__ import annotations

import io

import pytest
from pydantic import ValidationError
from rich.console import Console

from cli.display import display_render_errors, display_statement_kinds
from render_engine.loader import ACTION_KIND_MAP, load_statement
from render_engine.models import StatementKind

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _capture_console() -> tuple[Console, io.StringIO]:
    """Create a Console that writes plain text to a StringIO buffer."""
    buf = io.StringIO()
    console = Console(file=buf, no_color=True, highlight=False, width=120)
    return console, buf


# ---------------------------------------------------------------------------
# display_statement_kinds
# ---------------------------------------------------------------------------


class TestDisplayStatementKinds:
    def test_title_counts_kinds(self):
        console, buf = _capture_console()
        display_statement_kinds(console, ACTION_KIND_MAP)
        assert "Statement kinds (11)" in buf.getvalue()

    def test_actions_upper_cased_and_grouped(self):
        console, buf = _capture_console()
        display_statement_kinds(console, {"desc": StatementKind.DESCRIBE, "describe": StatementKind.DESCRIBE})
        output = buf.getvalue()
        assert "Statement kinds (1)" in output
        assert "DESC, DESCRIBE" in output

    def test_empty_map(self):
        console, buf = _capture_console()
        display_statement_kinds(console, {})
        assert "Statement kinds (0)" in buf.getvalue()


# ---------------------------------------------------------------------------
# display_render_errors
# ---------------------------------------------------------------------------


class TestDisplayRenderErrors:
    @pytest.fixture()
    def validation_error(self) -> ValidationError:
        with pytest.raises(ValidationError) as excinfo:
            load_statement({"type": "use"})
        return excinfo.value

    def test_title_counts_errors(self, validation_error):
        console, buf = _capture_console()
        display_render_errors(console, validation_error)
        assert f"Invalid statement AST ({validation_error.error_count()} errors)" in buf.getvalue()

    def test_location_listed(self, validation_error):
        console, buf = _capture_console()
        display_render_errors(console, validation_error)
        assert "use.db" in buf.getvalue()
