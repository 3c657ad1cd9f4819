"""stmtrender CLI application -- Typer-based interface to the statement renderer.

Provides commands for rendering JSON statement ASTs back into SQL and for
listing the supported statement kinds.  Rendered SQL goes to *stdout*;
human-readable decoration and errors go to *stderr* via Rich so that
pipelines can compose cleanly.
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli.display import display_render_errors, display_statement_kinds

# ---------------------------------------------------------------------------
# App & global state
# ---------------------------------------------------------------------------

app = typer.Typer(
    name="stmtrender",
    help="stmtrender - render SQL statement ASTs back into canonical SQL",
    no_args_is_help=True,
)
console = Console(stderr=True)

# Mutable global options populated by the Typer callback.
_json_output: bool = False


# ---------------------------------------------------------------------------
# Callback -- global options
# ---------------------------------------------------------------------------


@app.callback()
def _global_options(
    json_mode: bool = typer.Option(
        False,
        "--json/--no-json",
        help="Emit structured JSON to stdout instead of plain SQL lines.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging on stderr.",
    ),
) -> None:
    """Global options applied to every command."""
    global _json_output  # noqa: PLW0603
    _json_output = json_mode

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    )


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _read_source(source: str) -> str:
    """Return the JSON text from *source*, where ``-`` means stdin."""
    from render_engine.renderer import AstLoadError

    try:
        if source == "-":
            return sys.stdin.read()
        return Path(source).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise AstLoadError(f"Input is not valid UTF-8 ({exc.reason}): {source}") from exc


# ---------------------------------------------------------------------------
# render
# ---------------------------------------------------------------------------


@app.command()
def render(
    source: str = typer.Argument(
        ...,
        help="Path to a JSON AST file (one statement or a list), or '-' for stdin.",
    ),
    dialect: str | None = typer.Option(
        None,
        "--dialect",
        help="Quoting dialect (mysql, postgres, tsql, ...). Defaults to STMTRENDER_DIALECT or mysql.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Fail on object keywords that have no rendering rule.",
    ),
    max_depth: int | None = typer.Option(
        None,
        "--max-depth",
        help="Maximum IF/ELSE nesting depth.",
    ),
) -> None:
    """Render a JSON statement AST to SQL, one statement per line."""
    from render_engine.config import load_settings
    from render_engine.loader import load_program_json
    from render_engine.renderer import RenderError, build_context, render_statement

    overrides: dict[str, object] = {}
    if dialect is not None:
        overrides["dialect"] = dialect
    if strict:
        overrides["strict_keywords"] = True
    if max_depth is not None:
        overrides["max_nesting_depth"] = max_depth

    try:
        settings = load_settings(**overrides)
        program = load_program_json(_read_source(source))
        statements = program if isinstance(program, list) else [program]
        ctx = build_context(settings)
        rendered = [render_statement(stmt, ctx) for stmt in statements]
    except ValidationError as exc:
        display_render_errors(console, exc)
        raise typer.Exit(code=1) from exc
    except (RenderError, OSError) as exc:
        console.print(f"[red]Failed to render: {escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    if _json_output:
        payload = {"dialect": settings.dialect.value, "sql": rendered}
        sys.stdout.write(json.dumps(payload, indent=2) + "\n")
    else:
        for sql in rendered:
            sys.stdout.write(sql + "\n")


# ---------------------------------------------------------------------------
# kinds
# ---------------------------------------------------------------------------


@app.command()
def kinds() -> None:
    """List the supported statement kinds and the action keywords that map to them."""
    from render_engine.loader import ACTION_KIND_MAP

    if _json_output:
        grouped: dict[str, list[str]] = {}
        for action, kind in ACTION_KIND_MAP.items():
            grouped.setdefault(kind.value, []).append(action)
        sys.stdout.write(json.dumps(grouped, indent=2, sort_keys=True) + "\n")
    else:
        display_statement_kinds(console, ACTION_KIND_MAP)
