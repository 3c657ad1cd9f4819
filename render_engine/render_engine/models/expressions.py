"""Expression and fragment nodes consumed by the statement renderers.

Field aliases follow the JSON AST layout emitted by the upstream parser
(``type``, ``as``, ``dataType``, ...) so that dumped trees validate
directly.  Attribute names are the Python-side spelling; both are accepted
on construction.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class AstModel(BaseModel):
    """Base for every immutable AST node."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)


# ---------------------------------------------------------------------------
# Expressions
# ---------------------------------------------------------------------------


class ColumnRef(AstModel):
    """Column reference, optionally qualified by table (and database)."""

    type: Literal["column_ref"] = "column_ref"
    db: str | None = None
    table: str | None = None
    column: str


class NumberLiteral(AstModel):
    type: Literal["number"] = "number"
    value: int | float | str


class StringLiteral(AstModel):
    type: Literal["single_quote_string"] = "single_quote_string"
    value: str


class BoolLiteral(AstModel):
    type: Literal["bool"] = "bool"
    value: bool


class NullLiteral(AstModel):
    type: Literal["null"] = "null"
    value: None = None


class OriginExpr(AstModel):
    """A raw keyword carried verbatim by the parser (``select``, ``with grant option``)."""

    type: Literal["origin"] = "origin"
    value: str


class IdentifierExpr(AstModel):
    """A bare identifier, e.g. the name of a prepared statement."""

    type: Literal["default"] = "default"
    value: str


class VarExpr(AstModel):
    """A session / user variable such as ``@total`` or ``@@session.autocommit``."""

    type: Literal["var"] = "var"
    prefix: str = "@"
    name: str
    members: list[str] = Field(default_factory=list)


class ExprList(AstModel):
    type: Literal["expr_list"] = "expr_list"
    value: list[Expression] = Field(default_factory=list)
    parentheses: bool = False


class FunctionCall(AstModel):
    """Function or procedure invocation; ``args`` of ``None`` renders as ``()``."""

    type: Literal["function"] = "function"
    name: str
    args: ExprList | None = None


class BinaryExpr(AstModel):
    type: Literal["binary_expr"] = "binary_expr"
    operator: str
    left: Expression
    right: Expression
    parentheses: bool = False


class UnaryExpr(AstModel):
    type: Literal["unary_expr"] = "unary_expr"
    operator: str
    expr: Expression


class AssignExpr(AstModel):
    """Variable assignment as used by ``SET``: ``<left> <symbol> <right>``."""

    type: Literal["assign"] = "assign"
    left: Expression
    symbol: str = "="
    right: Expression


Expression = Annotated[
    Union[
        ColumnRef,
        NumberLiteral,
        StringLiteral,
        BoolLiteral,
        NullLiteral,
        OriginExpr,
        IdentifierExpr,
        VarExpr,
        ExprList,
        FunctionCall,
        BinaryExpr,
        UnaryExpr,
        AssignExpr,
    ],
    Field(discriminator="type"),
]

# Values handed to the literal renderer: a literal node or a plain string
# that is emitted verbatim.
LiteralValue = Union[Expression, str]


# ---------------------------------------------------------------------------
# Tables, types and column definitions
# ---------------------------------------------------------------------------


class TableRef(AstModel):
    """A table reference: ``[db.][schema.]table [AS alias]``."""

    db: str | None = None
    schema_name: str | None = Field(default=None, alias="schema")
    table: str
    alias: str | None = Field(default=None, alias="as")


class DataType(AstModel):
    """A column / variable data type such as ``VARCHAR(20)`` or ``DECIMAL(10, 2) UNSIGNED``."""

    data_type: str = Field(..., min_length=1, alias="dataType")
    length: int | None = None
    scale: int | None = None
    suffix: list[str] | None = None


class ColumnDefinition(AstModel):
    """One column of a ``DECLARE ... TABLE (...)`` body."""

    column: ColumnRef
    definition: DataType
    nullable: str | None = None  # "null" | "not null"
    default_val: Expression | None = None


for _model in (ExprList, FunctionCall, BinaryExpr, UnaryExpr, AssignExpr, ColumnDefinition):
    _model.model_rebuild()
