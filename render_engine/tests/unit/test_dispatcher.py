"""Unit tests for render_engine.renderer.dispatcher."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from render_engine.config import Dialect, Settings
from render_engine.models import (
    AssignExpr,
    DescribeStatement,
    NumberLiteral,
    SetVariableStatement,
    StatementKind,
    UseStatement,
    VarExpr,
)
from render_engine.renderer import (
    STATEMENT_SEPARATOR,
    AstLoadError,
    UnsupportedStatementError,
    build_context,
    render_program,
    render_statement,
    to_sql,
)
from render_engine.renderer.dispatcher import _RENDERERS


class TestRenderStatement:
    def test_every_kind_has_a_renderer(self):
        assert set(_RENDERERS) == set(StatementKind)

    def test_dispatches_on_kind(self, ctx):
        assert render_statement(UseStatement(action="use", db="mydb"), ctx) == "USE mydb"

    def test_unknown_kind(self, ctx):
        class Stray:
            kind = "merge"

        with pytest.raises(UnsupportedStatementError):
            render_statement(Stray(), ctx)  # type: ignore[arg-type]

    def test_missing_kind(self, ctx):
        with pytest.raises(UnsupportedStatementError):
            render_statement(object(), ctx)  # type: ignore[arg-type]


class TestRenderProgram:
    def test_single_statement(self, ctx):
        assert render_program(DescribeStatement(action="desc", table="t1"), ctx) == "DESC t1"

    def test_list_joined_with_separator(self, ctx):
        program = [UseStatement(action="use", db="db1"), DescribeStatement(action="desc", table="t1")]
        assert render_program(program, ctx) == f"USE db1{STATEMENT_SEPARATOR}DESC t1"

    def test_empty_list(self, ctx):
        assert render_program([], ctx) == ""


class TestBuildContext:
    def test_uses_settings_dialect(self):
        ctx = build_context(Settings(_env_file=None, dialect=Dialect.POSTGRES))
        assert ctx.fragments.dialect == Dialect.POSTGRES
        assert ctx.depth == 0

    def test_nested_increments_depth(self, ctx):
        assert ctx.nested().nested().depth == 2
        assert ctx.depth == 0


class TestToSql:
    def test_model_input(self, settings):
        stmt = SetVariableStatement(expr=AssignExpr(left=VarExpr(name="x"), right=NumberLiteral(value=1)))
        assert to_sql(stmt, settings=settings) == "SET @x = 1"

    def test_mapping_input(self, settings):
        assert to_sql({"type": "use", "db": "mydb"}, settings=settings) == "USE mydb"

    def test_mapping_list_input(self, settings):
        program = [{"type": "unlock", "keyword": "tables"}, {"type": "use", "db": "mydb"}]
        assert to_sql(program, settings=settings) == "UNLOCK TABLES ; USE mydb"

    def test_dialect_changes_quoting(self):
        settings = Settings(_env_file=None, dialect=Dialect.POSTGRES)
        assert to_sql({"type": "use", "db": "my db"}, settings=settings) == 'USE "my db"'

    def test_unknown_action(self, settings):
        with pytest.raises(AstLoadError):
            to_sql({"type": "merge"}, settings=settings)

    def test_missing_field(self, settings):
        with pytest.raises(ValidationError):
            to_sql({"type": "use"}, settings=settings)
