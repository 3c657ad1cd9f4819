"""SQLGlot-backed implementation of the :class:`FragmentRenderer` protocol.

This is the ONLY module in the render engine that imports ``sqlglot``.
SQLGlot decides when an identifier needs quoting (unsafe characters,
reserved words) and how string literals are quoted and escaped for the
target dialect; everything else is plain clause assembly.
"""

from __future__ import annotations

from collections.abc import Sequence

from sqlglot import exp

from render_engine.config import Dialect
from render_engine.models.expressions import (
    AssignExpr,
    BinaryExpr,
    BoolLiteral,
    ColumnDefinition,
    ColumnRef,
    DataType,
    Expression,
    ExprList,
    FunctionCall,
    IdentifierExpr,
    LiteralValue,
    NullLiteral,
    NumberLiteral,
    OriginExpr,
    StringLiteral,
    TableRef,
    UnaryExpr,
    VarExpr,
)

from .._helpers import join_non_empty, to_upper


class SqlGlotFragmentRenderer:
    """SQLGlot-backed :class:`FragmentRenderer` implementation."""

    def __init__(self, dialect: Dialect = Dialect.MYSQL) -> None:
        self._dialect = dialect

    @property
    def dialect(self) -> Dialect:
        return self._dialect

    # -- identifiers & literals ---------------------------------------------

    def identifier(self, name: str | None) -> str:
        if name is None or not str(name).strip():
            return ""
        if name == "*":
            return "*"
        return exp.to_identifier(name).sql(dialect=self._dialect.value)

    def literal(self, value: LiteralValue | None) -> str:
        if value is None:
            return ""
        if isinstance(value, str):
            return value
        if isinstance(value, StringLiteral):
            return exp.Literal.string(value.value).sql(dialect=self._dialect.value)
        if isinstance(value, NumberLiteral):
            return exp.Literal.number(value.value).sql(dialect=self._dialect.value)
        if isinstance(value, BoolLiteral):
            return "TRUE" if value.value else "FALSE"
        if isinstance(value, NullLiteral):
            return "NULL"
        if isinstance(value, OriginExpr):
            return to_upper(value.value)
        return self.expr(value)

    # -- expressions --------------------------------------------------------

    def expr(self, node: Expression | None) -> str:
        if node is None:
            return ""
        if isinstance(node, (StringLiteral, NumberLiteral, BoolLiteral, NullLiteral, OriginExpr)):
            return self.literal(node)
        if isinstance(node, ColumnRef):
            return self.column_ref(node)
        if isinstance(node, IdentifierExpr):
            return self.identifier(node.value)
        if isinstance(node, VarExpr):
            return node.prefix + ".".join([node.name, *node.members])
        if isinstance(node, ExprList):
            return self._expr_list(node)
        if isinstance(node, FunctionCall):
            args = join_non_empty((self.expr(v) for v in node.args.value), ", ") if node.args else ""
            return f"{node.name}({args})"
        if isinstance(node, BinaryExpr):
            text = join_non_empty([self.expr(node.left), to_upper(node.operator), self.expr(node.right)])
            return f"({text})" if node.parentheses else text
        if isinstance(node, UnaryExpr):
            operator = to_upper(node.operator)
            if operator.isalpha():
                return join_non_empty([operator, self.expr(node.expr)])
            return f"{operator}{self.expr(node.expr)}"
        if isinstance(node, AssignExpr):
            return join_non_empty([self.expr(node.left), node.symbol, self.expr(node.right)])
        raise TypeError(f"Unsupported expression node: {type(node).__name__}")

    def _expr_list(self, node: ExprList) -> str:
        text = join_non_empty((self.expr(v) for v in node.value), ", ")
        return f"({text})" if node.parentheses else text

    # -- tables & columns ---------------------------------------------------

    def table(self, ref: TableRef | None) -> str:
        if ref is None:
            return ""
        name = join_non_empty(
            [self.identifier(ref.db), self.identifier(ref.schema_name), self.identifier(ref.table)],
            ".",
        )
        if ref.alias:
            return f"{name} AS {self.identifier(ref.alias)}"
        return name

    def tables(self, refs: Sequence[TableRef] | None) -> str:
        if not refs:
            return ""
        return join_non_empty((self.table(r) for r in refs), ", ")

    def column_ref(self, ref: ColumnRef | str | None) -> str:
        if ref is None:
            return ""
        if isinstance(ref, str):
            return self.identifier(ref)
        return join_non_empty(
            [self.identifier(ref.db), self.identifier(ref.table), self.identifier(ref.column)],
            ".",
        )

    # -- types & definitions ------------------------------------------------

    def data_type(self, dtype: DataType | None) -> str:
        if dtype is None:
            return ""
        text = to_upper(dtype.data_type)
        if dtype.length is not None:
            size = join_non_empty([dtype.length, dtype.scale], ", ")
            text = f"{text}({size})"
        return join_non_empty([text, *(to_upper(s) for s in dtype.suffix or [])])

    def create_definition(self, definition: ColumnDefinition) -> str:
        default = f"DEFAULT {self.expr(definition.default_val)}" if definition.default_val is not None else ""
        return join_non_empty(
            [
                self.column_ref(definition.column),
                self.data_type(definition.definition),
                to_upper(definition.nullable),
                default,
            ]
        )
