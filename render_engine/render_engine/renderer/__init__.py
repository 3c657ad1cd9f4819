"""Statement renderer -- turns statement nodes back into canonical SQL.

Usage::

    from render_engine.renderer import to_sql

    to_sql({"type": "use", "db": "mydb"})            # "USE mydb"
    to_sql({"type": "unlock", "keyword": "tables"})  # "UNLOCK TABLES"

Identifier and literal quoting is delegated to a :class:`FragmentRenderer`;
the default implementation is SQLGlot-backed.  A different backend can be
swapped in via ``register_implementation()`` without touching the
statement renderers.
"""

from ._factory import get_fragment_renderer, register_implementation, reset_renderer
from ._helpers import has_val, join_non_empty, to_upper
from ._protocols import FragmentRenderer
from ._types import (
    AstLoadError,
    NestingDepthError,
    RenderContext,
    RenderError,
    UnsupportedKeywordError,
    UnsupportedStatementError,
)
from .dispatcher import STATEMENT_SEPARATOR, build_context, render_program, render_statement, to_sql
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

__all__ = [
    # Factory
    "get_fragment_renderer",
    "register_implementation",
    "reset_renderer",
    # Protocols
    "FragmentRenderer",
    # Dispatcher
    "STATEMENT_SEPARATOR",
    "build_context",
    "render_program",
    "render_statement",
    "to_sql",
    # Statement renderers
    "call_to_sql",
    "common_command_to_sql",
    "deallocate_to_sql",
    "declare_to_sql",
    "describe_to_sql",
    "grant_to_sql",
    "if_to_sql",
    "lock_unlock_to_sql",
    "rename_to_sql",
    "set_variable_to_sql",
    "use_to_sql",
    # Helpers
    "has_val",
    "join_non_empty",
    "to_upper",
    # Types
    "RenderContext",
    # Exceptions
    "RenderError",
    "UnsupportedKeywordError",
    "NestingDepthError",
    "UnsupportedStatementError",
    "AstLoadError",
]
