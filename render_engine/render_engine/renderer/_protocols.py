"""Fragment renderer protocol.

Statement renderers own clause assembly only.  Every sub-part they do not
own -- identifiers, literals, expressions, table and column references,
data types and column definitions -- is delegated to an object satisfying
:class:`FragmentRenderer`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

from render_engine.config import Dialect
from render_engine.models.expressions import (
    ColumnDefinition,
    ColumnRef,
    DataType,
    Expression,
    LiteralValue,
    TableRef,
)


@runtime_checkable
class FragmentRenderer(Protocol):
    """Render AST fragments to SQL text for one dialect."""

    @property
    def dialect(self) -> Dialect:
        ...

    def identifier(self, name: str | None) -> str:
        """Quote *name* when the dialect requires it.

        Returns an empty string for ``None`` / empty input so the result can
        be dropped by the clause joiner.  ``*`` is never quoted.
        """
        ...

    def literal(self, value: LiteralValue | None) -> str:
        """Render a literal node; plain strings are emitted verbatim."""
        ...

    def expr(self, node: Expression | None) -> str:
        """Render an arbitrary expression node."""
        ...

    def table(self, ref: TableRef | None) -> str:
        """Render ``[db.][schema.]table [AS alias]``."""
        ...

    def tables(self, refs: Sequence[TableRef] | None) -> str:
        """Render a comma-separated table list."""
        ...

    def column_ref(self, ref: ColumnRef | str | None) -> str:
        """Render a column reference (a plain string is one identifier)."""
        ...

    def data_type(self, dtype: DataType | None) -> str:
        """Render ``TYPE[(length[, scale])] [SUFFIX ...]``."""
        ...

    def create_definition(self, definition: ColumnDefinition) -> str:
        """Render one column definition of a table body."""
        ...
