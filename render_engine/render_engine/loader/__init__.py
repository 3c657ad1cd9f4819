"""JSON AST loading."""

from .ast_loader import ACTION_KIND_MAP, load_program, load_program_json, load_statement

__all__ = ["ACTION_KIND_MAP", "load_program", "load_program_json", "load_statement"]
