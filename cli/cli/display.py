"""Rich output formatting for the stmtrender CLI.

All functions write to a :class:`rich.console.Console` instance (typically
bound to *stderr*) so that rendered SQL on *stdout* is never polluted with
human-readable decoration.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.table import Table

if TYPE_CHECKING:
    from pydantic import ValidationError

    from render_engine.models.statements import StatementKind


# ---------------------------------------------------------------------------
# Statement kinds
# ---------------------------------------------------------------------------


def display_statement_kinds(console: Console, action_map: Mapping[str, StatementKind]) -> None:
    """Render a table of statement kinds and the action keywords mapped to each.

    Parameters
    ----------
    console:
        Rich console to write to.
    action_map:
        Action keyword -> statement kind, as used by the AST loader.
    """
    grouped: dict[str, list[str]] = {}
    for action, kind in action_map.items():
        grouped.setdefault(kind.value, []).append(action.upper())

    table = Table(
        title=f"Statement kinds ({len(grouped)})",
        show_lines=False,
        pad_edge=True,
        expand=False,
    )
    table.add_column("Kind", style="bold")
    table.add_column("Actions")

    for kind in sorted(grouped):
        table.add_row(kind, ", ".join(grouped[kind]))

    console.print(table)


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


def display_render_errors(console: Console, error: ValidationError) -> None:
    """Render pydantic validation errors as a location / message table."""
    table = Table(title=f"[red]Invalid statement AST ({error.error_count()} errors)[/red]")
    table.add_column("Location", style="bold")
    table.add_column("Error")

    for item in error.errors():
        location = ".".join(str(part) for part in item.get("loc", ()))
        table.add_row(escape(location or "-"), escape(item.get("msg", "")))

    console.print(table)
