"""Statement renderers -- one pure function per statement kind.

Each function takes a validated statement node plus a :class:`RenderContext`
and returns one line of SQL.  Keywords are upper-cased here, never assumed
pre-cased in the node.  Sub-parts (identifiers, literals, expressions,
tables, columns, types) go through ``ctx.fragments``; nested IF bodies go
through ``ctx.render_program``.

Every clause list is assembled with :func:`join_non_empty`, so an empty
clause disappears instead of leaving a doubled or trailing space.
"""

from __future__ import annotations

import logging

from render_engine.models.expressions import ColumnDefinition, ColumnRef, DataType, TableRef
from render_engine.models.statements import (
    CallStatement,
    CommonCommandStatement,
    DeallocateStatement,
    Declaration,
    DeclarationKind,
    DeclareStatement,
    DescribeStatement,
    GrantOn,
    GrantStatement,
    IfBranch,
    IfStatement,
    LockUnlockStatement,
    RenameStatement,
    SetVariableStatement,
    TriggerName,
    UserOrRole,
    UseStatement,
)

from ._helpers import join_non_empty, to_upper
from ._types import RenderContext, RenderError, UnsupportedKeywordError

logger = logging.getLogger(__name__)

# Lock type sub-fields, in output order.
_LOCK_TYPE_KEYS: tuple[str, ...] = ("prefix", "type", "suffix")


def _unsupported_keyword(statement: str, keyword: str | None, ctx: RenderContext) -> str:
    """Empty-clause fallback for an object keyword with no rendering rule.

    In strict mode the gap is an error instead.
    """
    if ctx.settings.strict_keywords:
        raise UnsupportedKeywordError(statement, keyword)
    logger.warning("%s: no rendering rule for keyword %r; clause omitted", statement, keyword)
    return ""


# ---------------------------------------------------------------------------
# CALL / SET / USE / DESCRIBE / DEALLOCATE
# ---------------------------------------------------------------------------


def call_to_sql(stmt: CallStatement, ctx: RenderContext) -> str:
    """``CALL <expr>``."""
    return f"CALL {ctx.fragments.expr(stmt.expr)}"


def set_variable_to_sql(stmt: SetVariableStatement, ctx: RenderContext) -> str:
    """``SET <assignment>``."""
    return f"SET {ctx.fragments.expr(stmt.expr)}"


def use_to_sql(stmt: UseStatement, ctx: RenderContext) -> str:
    return join_non_empty([to_upper(stmt.action), ctx.fragments.identifier(stmt.db)])


def describe_to_sql(stmt: DescribeStatement, ctx: RenderContext) -> str:
    return join_non_empty([to_upper(stmt.action), ctx.fragments.identifier(stmt.table)])


def deallocate_to_sql(stmt: DeallocateStatement, ctx: RenderContext) -> str:
    return join_non_empty(
        [to_upper(stmt.action), to_upper(stmt.keyword), ctx.fragments.expr(stmt.expr)]
    )


# ---------------------------------------------------------------------------
# Common DDL commands
# ---------------------------------------------------------------------------


def _table_names(stmt: CommonCommandStatement) -> list[TableRef]:
    if isinstance(stmt.name, list) and all(isinstance(n, TableRef) for n in stmt.name):
        return stmt.name  # type: ignore[return-value]
    raise RenderError(
        f"{to_upper(stmt.action)} {to_upper(stmt.keyword)} expects a list of table references"
    )


def _options(stmt: CommonCommandStatement, ctx: RenderContext) -> str:
    return join_non_empty(ctx.fragments.expr(o) for o in stmt.options or [])


def common_command_to_sql(stmt: CommonCommandStatement, ctx: RenderContext) -> str:
    """Render ``<ACTION> <OBJECT> [<PREFIX>] <target> [<options>]``.

    The target is rendered according to the object keyword; an unknown
    keyword leaves the target empty (or raises in strict mode).
    """
    f = ctx.fragments
    keyword = (stmt.keyword or "").lower()
    clauses = [to_upper(stmt.action), to_upper(stmt.keyword), to_upper(stmt.prefix)]

    if keyword == "table":
        clauses.append(f.tables(_table_names(stmt)))
    elif keyword == "trigger":
        if not isinstance(stmt.name, list) or not stmt.name or not isinstance(stmt.name[0], TriggerName):
            raise RenderError(f"{to_upper(stmt.action)} TRIGGER expects a trigger name")
        trigger = stmt.name[0]
        clauses.append(join_non_empty([f.identifier(trigger.schema_name), f.identifier(trigger.trigger)], "."))
    elif keyword in ("database", "schema", "procedure"):
        if not isinstance(stmt.name, str):
            raise RenderError(f"{to_upper(stmt.action)} {to_upper(stmt.keyword)} expects an identifier")
        clauses.append(f.identifier(stmt.name))
    elif keyword == "view":
        clauses.extend([f.tables(_table_names(stmt)), _options(stmt, ctx)])
    elif keyword == "index":
        if not isinstance(stmt.name, (ColumnRef, str)):
            raise RenderError(f"{to_upper(stmt.action)} INDEX expects an index name")
        clauses.append(f.column_ref(stmt.name))
        if stmt.table is not None:
            clauses.extend(["ON", f.table(stmt.table)])
        clauses.append(_options(stmt, ctx))
    else:
        clauses.append(_unsupported_keyword("common command", stmt.keyword, ctx))

    return join_non_empty(clauses)


# ---------------------------------------------------------------------------
# RENAME TABLE
# ---------------------------------------------------------------------------


def rename_to_sql(stmt: RenameStatement, ctx: RenderContext) -> str:
    """``<ACTION> TABLE a TO b, c TO d``; no groups leaves just ``<ACTION> TABLE``."""
    f = ctx.fragments
    prefix = f"{to_upper(stmt.action)} TABLE"
    chains = [join_non_empty((f.table(t) for t in group), " TO ") for group in stmt.groups or []]
    return join_non_empty([prefix, join_non_empty(chains, ", ")])


# ---------------------------------------------------------------------------
# LOCK / UNLOCK
# ---------------------------------------------------------------------------


def lock_unlock_to_sql(stmt: LockUnlockStatement, ctx: RenderContext) -> str:
    """``UNLOCK TABLES`` or ``LOCK TABLES t1 READ, t2 WRITE [<MODE>] [NOWAIT]``.

    For UNLOCK only the action and object keyword are read.
    """
    action = to_upper(stmt.action)
    result = [action, to_upper(stmt.keyword)]
    if action == "UNLOCK":
        return join_non_empty(result)

    if stmt.tables is None:
        raise RenderError(f"{action} requires a table list")

    entries = []
    for info in stmt.tables:
        entry = [ctx.fragments.table(info.table)]
        if info.lock_type is not None:
            entry.append(join_non_empty(to_upper(getattr(info.lock_type, k)) for k in _LOCK_TYPE_KEYS))
        entries.append(join_non_empty(entry))
    result.append(join_non_empty(entries, ", "))

    if stmt.lock_mode is not None:
        result.append(to_upper(stmt.lock_mode.mode))
    if stmt.nowait:
        result.append(to_upper(stmt.nowait))
    return join_non_empty(result)


# ---------------------------------------------------------------------------
# DECLARE
# ---------------------------------------------------------------------------


def _prefix_text(prefix: DataType | str | None, ctx: RenderContext) -> str:
    if isinstance(prefix, DataType):
        return ctx.fragments.data_type(prefix)
    return to_upper(prefix)


def _declaration_to_sql(dec: Declaration, ctx: RenderContext) -> str:
    f = ctx.fragments
    parts = [f"{dec.at}{dec.name}", to_upper(dec.as_)]
    keyword = dec.keyword.lower()

    if keyword == DeclarationKind.VARIABLE.value:
        parts.append(_prefix_text(dec.prefix, ctx))
        if dec.definition is not None:
            if isinstance(dec.definition, list):
                raise RenderError(f"DECLARE {dec.at}{dec.name}: a variable default must be an expression")
            parts.extend(["=", f.expr(dec.definition)])
    elif keyword == DeclarationKind.CURSOR.value:
        parts.append(_prefix_text(dec.prefix, ctx))
    elif keyword == DeclarationKind.TABLE.value:
        if not isinstance(dec.definition, list):
            raise RenderError(f"DECLARE {dec.at}{dec.name}: a table variable needs column definitions")
        columns: list[ColumnDefinition] = dec.definition
        parts.extend(
            [
                _prefix_text(dec.prefix, ctx),
                f"({', '.join(f.create_definition(c) for c in columns)})",
            ]
        )
    else:
        parts.append(_unsupported_keyword("declare", dec.keyword, ctx))

    return join_non_empty(parts)


def declare_to_sql(stmt: DeclareStatement, ctx: RenderContext) -> str:
    """``DECLARE @a INT = 1, @c CURSOR, @t TABLE (id INT)``."""
    entries = join_non_empty((_declaration_to_sql(d, ctx) for d in stmt.declarations), ", ")
    return join_non_empty([to_upper(stmt.action), entries])


# ---------------------------------------------------------------------------
# IF / ELSE
# ---------------------------------------------------------------------------


def _branch_to_sql(branch: IfBranch, ctx: RenderContext) -> str:
    # The terminator hugs the body: "SET @a = 1;" not "SET @a = 1 ;".
    return f"{ctx.render_program(branch.ast, ctx)}{branch.terminator}"


def if_to_sql(stmt: IfStatement, ctx: RenderContext) -> str:
    """``IF <cond> <body><term> [GO] [ELSE <body><term>]``.

    Branch bodies are rendered one nesting level deeper; exceeding
    ``settings.max_nesting_depth`` raises :class:`NestingDepthError`.
    """
    nested = ctx.nested()
    result = [
        "IF",
        ctx.fragments.expr(stmt.condition),
        _branch_to_sql(stmt.then_branch, nested),
        to_upper(stmt.go),
    ]
    if stmt.else_branch is not None:
        result.extend(["ELSE", _branch_to_sql(stmt.else_branch, nested)])
    return join_non_empty(result)


# ---------------------------------------------------------------------------
# GRANT
# ---------------------------------------------------------------------------


def _user_or_role_to_sql(user: UserOrRole, ctx: RenderContext) -> str:
    f = ctx.fragments
    if user.host is None:
        return f.literal(user.name)
    return f"{f.literal(user.name)}@{f.literal(user.host)}"


def grant_to_sql(stmt: GrantStatement, ctx: RenderContext) -> str:
    """Render ``GRANT <privs> [ON <target>] TO <grantees> [WITH ...]``."""
    f = ctx.fragments
    keyword = (stmt.keyword or "").lower()
    result = [to_upper(stmt.action)]

    privileges = []
    for obj in stmt.objects:
        columns = f"({', '.join(f.column_ref(c) for c in obj.columns)})" if obj.columns else ""
        privileges.append(join_non_empty([f.expr(obj.priv), columns]))
    result.append(", ".join(privileges))

    if stmt.on is not None:
        result.append("ON")
        if keyword == "priv":
            if not isinstance(stmt.on, GrantOn):
                raise RenderError("GRANT ... ON expects an object type and privilege levels")
            levels = ", ".join(
                join_non_empty([f.identifier(level.prefix), f.identifier(level.name)], ".")
                for level in stmt.on.priv_level
            )
            result.extend([f.literal(stmt.on.object_type), levels])
        elif keyword == "proxy":
            if not isinstance(stmt.on, UserOrRole):
                raise RenderError("GRANT PROXY ON expects a user or role")
            result.append(_user_or_role_to_sql(stmt.on, ctx))
        else:
            result.append(_unsupported_keyword("grant", stmt.keyword, ctx))

    result.extend(["TO", ", ".join(_user_or_role_to_sql(u, ctx) for u in stmt.to)])
    result.append(f.literal(stmt.with_))
    return join_non_empty(result)
