"""stmtrender -- render non-DML SQL statement trees back into SQL text."""

from render_engine.config import Dialect, Settings, load_settings
from render_engine.loader import load_program, load_program_json, load_statement
from render_engine.renderer import RenderError, render_program, render_statement, to_sql

__version__ = "0.1.0"

__all__ = [
    "Dialect",
    "Settings",
    "load_settings",
    "load_program",
    "load_program_json",
    "load_statement",
    "RenderError",
    "render_program",
    "render_statement",
    "to_sql",
    "__version__",
]
