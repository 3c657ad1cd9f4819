"""Statement nodes: one frozen model per renderable statement kind.

Every node carries a ``kind`` discriminant; :data:`Statement` is the closed
union over all of them.  Action and object keywords are stored exactly as
the parser produced them and are upper-cased only when rendered.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import Field, model_validator

from render_engine.models.expressions import (
    AstModel,
    ColumnDefinition,
    ColumnRef,
    DataType,
    Expression,
    LiteralValue,
    TableRef,
)


class StatementKind(str, Enum):
    """Discriminant values for :data:`Statement`."""

    CALL = "call"
    COMMON_COMMAND = "common_command"
    DESCRIBE = "describe"
    RENAME = "rename"
    USE = "use"
    SET_VARIABLE = "set_variable"
    LOCK_UNLOCK = "lock_unlock"
    DEALLOCATE = "deallocate"
    DECLARE = "declare"
    IF = "if"
    GRANT = "grant"


# ---------------------------------------------------------------------------
# Simple statements
# ---------------------------------------------------------------------------


class CallStatement(AstModel):
    """``CALL proc(args)``."""

    kind: Literal["call"] = "call"
    expr: Expression


class TriggerName(AstModel):
    schema_name: str | None = Field(default=None, alias="schema")
    trigger: str


class CommonCommandStatement(AstModel):
    """DDL action on a named object: ``DROP TABLE``, ``TRUNCATE TABLE``, ``DROP INDEX``, ...

    The shape of ``name`` depends on ``keyword``:

    * ``table`` / ``view`` -- a list of table references
    * ``trigger`` -- a list holding one (optionally schema-qualified) trigger
    * ``database`` / ``schema`` / ``procedure`` -- a plain identifier
    * ``index`` -- the index name, with the owning table in ``table``
    """

    kind: Literal["common_command"] = "common_command"
    action: str = Field(..., alias="type")
    keyword: str
    prefix: str | None = None
    name: list[TableRef] | list[TriggerName] | ColumnRef | str
    table: TableRef | None = None
    options: list[Expression] | None = None


class DescribeStatement(AstModel):
    kind: Literal["describe"] = "describe"
    action: str = Field(..., alias="type")
    table: str


class RenameStatement(AstModel):
    """``RENAME TABLE a TO b, c TO d``; each group is chained with ``TO``."""

    kind: Literal["rename"] = "rename"
    action: str = Field(..., alias="type")
    groups: list[list[TableRef]] | None = Field(default=None, alias="table")


class UseStatement(AstModel):
    kind: Literal["use"] = "use"
    action: str = Field(..., alias="type")
    db: str


class SetVariableStatement(AstModel):
    kind: Literal["set_variable"] = "set_variable"
    expr: Expression


class LockType(AstModel):
    """Per-table lock type, e.g. ``READ LOCAL`` or ``LOW_PRIORITY WRITE``."""

    prefix: str | None = None
    type: str | None = None
    suffix: str | None = None


class LockTable(AstModel):
    table: TableRef
    lock_type: LockType | None = None


class LockMode(AstModel):
    mode: str


class LockUnlockStatement(AstModel):
    """``LOCK TABLES ...`` / ``UNLOCK TABLES``; the table list is read only for LOCK."""

    kind: Literal["lock_unlock"] = "lock_unlock"
    action: str = Field(..., alias="type")
    keyword: str | None = None
    tables: list[LockTable] | None = None
    lock_mode: LockMode | None = None
    nowait: str | None = None


class DeallocateStatement(AstModel):
    kind: Literal["deallocate"] = "deallocate"
    action: str = Field(..., alias="type")
    keyword: str | None = None
    expr: Expression


# ---------------------------------------------------------------------------
# DECLARE
# ---------------------------------------------------------------------------


class DeclarationKind(str, Enum):
    VARIABLE = "variable"
    CURSOR = "cursor"
    TABLE = "table"


class Declaration(AstModel):
    """One ``DECLARE`` entry.

    ``prefix`` is the data type for variables and the leading keyword
    (``CURSOR FOR``, ``TABLE``) otherwise.  ``definition`` is the default
    value for variables and the column list for table variables.
    """

    at: str = "@"
    name: str
    as_: str | None = Field(default=None, alias="as")
    keyword: str
    prefix: DataType | str | None = None
    definition: Expression | list[ColumnDefinition] | None = None


class DeclareStatement(AstModel):
    kind: Literal["declare"] = "declare"
    action: str = Field(..., alias="type")
    declarations: list[Declaration] = Field(..., alias="declare")


# ---------------------------------------------------------------------------
# IF / ELSE
# ---------------------------------------------------------------------------


class IfBranch(AstModel):
    """A branch body plus the terminator written straight after it (usually ``;``)."""

    ast: Statement | list[Statement]
    terminator: str = ""


class IfStatement(AstModel):
    kind: Literal["if"] = "if"
    condition: Expression = Field(..., alias="boolean_expr")
    then_branch: IfBranch = Field(..., alias="if_expr")
    go: str | None = None
    else_branch: IfBranch | None = Field(default=None, alias="else_expr")

    @model_validator(mode="before")
    @classmethod
    def _attach_semicolons(cls, data: Any) -> Any:
        """Move a parser-level ``semicolons`` pair onto the two branches."""
        if not isinstance(data, dict) or "semicolons" not in data:
            return data
        data = dict(data)
        semicolons = data.pop("semicolons") or []
        for index, key in enumerate(("if_expr", "else_expr")):
            branch = data.get(key)
            if isinstance(branch, dict) and "terminator" not in branch and index < len(semicolons):
                data[key] = {**branch, "terminator": semicolons[index] or ""}
        return data


# ---------------------------------------------------------------------------
# GRANT
# ---------------------------------------------------------------------------


class GrantObject(AstModel):
    priv: Expression
    columns: list[ColumnRef] | None = None


class PrivLevel(AstModel):
    """``[prefix.]name``, e.g. ``db.*`` or ``*.*``."""

    prefix: str | None = None
    name: str


class GrantOn(AstModel):
    object_type: LiteralValue | None = None
    priv_level: list[PrivLevel]


class UserOrRole(AstModel):
    name: LiteralValue
    host: LiteralValue | None = None


class GrantStatement(AstModel):
    kind: Literal["grant"] = "grant"
    action: str = Field(..., alias="type")
    keyword: str
    objects: list[GrantObject]
    on: GrantOn | UserOrRole | None = None
    to: list[UserOrRole] = Field(..., min_length=1)
    with_: LiteralValue | None = Field(default=None, alias="with")


Statement = Annotated[
    Union[
        CallStatement,
        CommonCommandStatement,
        DescribeStatement,
        RenameStatement,
        UseStatement,
        SetVariableStatement,
        LockUnlockStatement,
        DeallocateStatement,
        DeclareStatement,
        IfStatement,
        GrantStatement,
    ],
    Field(discriminator="kind"),
]

Program = Union[Statement, list[Statement]]

IfBranch.model_rebuild()
IfStatement.model_rebuild()
