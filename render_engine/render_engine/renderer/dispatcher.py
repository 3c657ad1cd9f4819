"""Top-level dispatcher: statement node -> statement renderer.

The dispatch table is keyed by :class:`StatementKind` and must cover every
member; :func:`_check_exhaustive` enforces that at import time so a new
statement kind cannot be added without a renderer.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable

from pydantic import BaseModel

from render_engine.config import Settings, load_settings
from render_engine.models.statements import Program, StatementKind

from ._factory import get_fragment_renderer
from ._protocols import FragmentRenderer
from ._types import RenderContext, UnsupportedStatementError
from .statements import (
    call_to_sql,
    common_command_to_sql,
    deallocate_to_sql,
    declare_to_sql,
    describe_to_sql,
    grant_to_sql,
    if_to_sql,
    lock_unlock_to_sql,
    rename_to_sql,
    set_variable_to_sql,
    use_to_sql,
)

logger = logging.getLogger(__name__)

# Statements of a multi-statement program are joined with this separator.
STATEMENT_SEPARATOR = " ; "

_RENDERERS: dict[StatementKind, Callable[[Any, RenderContext], str]] = {
    StatementKind.CALL: call_to_sql,
    StatementKind.COMMON_COMMAND: common_command_to_sql,
    StatementKind.DESCRIBE: describe_to_sql,
    StatementKind.RENAME: rename_to_sql,
    StatementKind.USE: use_to_sql,
    StatementKind.SET_VARIABLE: set_variable_to_sql,
    StatementKind.LOCK_UNLOCK: lock_unlock_to_sql,
    StatementKind.DEALLOCATE: deallocate_to_sql,
    StatementKind.DECLARE: declare_to_sql,
    StatementKind.IF: if_to_sql,
    StatementKind.GRANT: grant_to_sql,
}


def _check_exhaustive() -> None:
    missing = set(StatementKind) - set(_RENDERERS)
    if missing:
        raise RuntimeError(f"No renderer registered for: {sorted(k.value for k in missing)}")


_check_exhaustive()


def render_statement(node: BaseModel, ctx: RenderContext) -> str:
    """Render a single statement node with the renderer for its ``kind``."""
    kind = getattr(node, "kind", None)
    try:
        renderer = _RENDERERS[StatementKind(kind)]
    except ValueError:
        raise UnsupportedStatementError(f"No renderer for statement kind {kind!r}") from None
    return renderer(node, ctx)


def render_program(ast: Program, ctx: RenderContext) -> str:
    """Render one statement or a list of statements.

    List members are joined with :data:`STATEMENT_SEPARATOR`; empty
    renderings are dropped.
    """
    if isinstance(ast, list):
        rendered = (render_statement(stmt, ctx) for stmt in ast)
        return STATEMENT_SEPARATOR.join(sql for sql in rendered if sql)
    return render_statement(ast, ctx)


def build_context(
    settings: Settings | None = None,
    fragments: FragmentRenderer | None = None,
) -> RenderContext:
    """Assemble a depth-0 :class:`RenderContext`.

    Defaults: settings from the environment, and the factory's fragment
    renderer for the configured dialect.
    """
    settings = settings or load_settings()
    fragments = fragments or get_fragment_renderer(settings.dialect)
    return RenderContext(fragments=fragments, settings=settings, render_program=render_program)


def to_sql(
    ast: Program | Mapping[str, Any] | Sequence[Any],
    *,
    settings: Settings | None = None,
    fragments: FragmentRenderer | None = None,
) -> str:
    """Render statement nodes, or raw JSON-AST mappings, to SQL.

    Mappings (and lists of mappings) are validated through
    :func:`render_engine.loader.load_program` first.

    Raises:
        AstLoadError: If a mapping cannot be mapped to a statement kind.
        pydantic.ValidationError: If a node is missing a required field.
        RenderError: For rendering failures (strict keywords, nesting depth).
    """
    from render_engine.loader import load_program

    if not isinstance(ast, BaseModel):
        if isinstance(ast, list) and all(isinstance(s, BaseModel) for s in ast):
            program: Program = ast
        else:
            program = load_program(ast)
    else:
        program = ast  # type: ignore[assignment]

    ctx = build_context(settings, fragments)
    sql = render_program(program, ctx)
    logger.debug("Rendered %s statement(s)", len(program) if isinstance(program, list) else 1)
    return sql
