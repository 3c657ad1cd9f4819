"""Load JSON ASTs into statement nodes.

Parsers emit statement records tagged by their action keyword (``"type":
"drop"``) rather than by statement kind.  The loader infers the ``kind``
discriminant from the action where it is absent -- recursively, so IF
bodies are covered too -- and then validates through pydantic.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import BaseModel, TypeAdapter

from render_engine.models.statements import Program, Statement, StatementKind
from render_engine.renderer._types import AstLoadError

logger = logging.getLogger(__name__)

# Action keyword (the parser's ``type`` field) -> statement kind.
ACTION_KIND_MAP: dict[str, StatementKind] = {
    "call": StatementKind.CALL,
    "create": StatementKind.COMMON_COMMAND,
    "drop": StatementKind.COMMON_COMMAND,
    "alter": StatementKind.COMMON_COMMAND,
    "truncate": StatementKind.COMMON_COMMAND,
    "desc": StatementKind.DESCRIBE,
    "describe": StatementKind.DESCRIBE,
    "explain": StatementKind.DESCRIBE,
    "rename": StatementKind.RENAME,
    "use": StatementKind.USE,
    "set": StatementKind.SET_VARIABLE,
    "lock": StatementKind.LOCK_UNLOCK,
    "unlock": StatementKind.LOCK_UNLOCK,
    "deallocate": StatementKind.DEALLOCATE,
    "declare": StatementKind.DECLARE,
    "if": StatementKind.IF,
    "grant": StatementKind.GRANT,
}

_BRANCH_KEYS: tuple[str, ...] = ("if_expr", "else_expr", "then_branch", "else_branch")

_statement_adapter: TypeAdapter[Any] = TypeAdapter(Statement)


def _with_kind(data: Any) -> Any:
    if isinstance(data, BaseModel):
        return data
    if not isinstance(data, Mapping):
        raise AstLoadError(f"Expected a statement object, got {type(data).__name__}")

    record = dict(data)
    if "kind" not in record:
        action = str(record.get("type") or "").lower()
        kind = ACTION_KIND_MAP.get(action)
        if kind is None:
            raise AstLoadError(f"Cannot infer statement kind from type {record.get('type')!r}")
        record["kind"] = kind.value

    if record["kind"] == StatementKind.IF.value:
        for key in _BRANCH_KEYS:
            branch = record.get(key)
            if isinstance(branch, Mapping) and "ast" in branch:
                record[key] = {**branch, "ast": _program_with_kinds(branch["ast"])}
    return record


def _program_with_kinds(ast: Any) -> Any:
    if isinstance(ast, list):
        return [_with_kind(stmt) for stmt in ast]
    return _with_kind(ast)


def load_statement(data: Mapping[str, Any] | BaseModel) -> Statement:
    """Validate one statement record.

    Raises:
        AstLoadError: If the statement kind cannot be determined.
        pydantic.ValidationError: If a required field is missing or malformed.
    """
    if isinstance(data, BaseModel):
        return data  # type: ignore[return-value]
    return _statement_adapter.validate_python(_with_kind(data))


def load_program(data: Mapping[str, Any] | Sequence[Any]) -> Program:
    """Validate a single statement record or a list of them."""
    if isinstance(data, Mapping):
        return load_statement(data)
    if isinstance(data, (str, bytes)):
        raise AstLoadError("Expected a statement object or list, got a string")
    if not isinstance(data, Sequence):
        raise AstLoadError(f"Expected a statement object or list, got {type(data).__name__}")
    statements = [load_statement(stmt) for stmt in data]
    logger.debug("Loaded %d statement(s)", len(statements))
    return statements


def load_program_json(text: str | bytes) -> Program:
    """Parse JSON text and validate it as a program."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AstLoadError(f"Invalid JSON AST: {exc}") from exc
    return load_program(data)
