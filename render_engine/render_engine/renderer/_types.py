"""Renderer shared types: the render context and the exception hierarchy.

Nothing here depends on a particular quoting backend.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from render_engine.config import Settings
    from render_engine.models.statements import Program

    from ._protocols import FragmentRenderer


# ---------------------------------------------------------------------------
# Render Context
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Everything a statement renderer needs besides the node itself.

    Immutable.  ``render_program`` is the top-level dispatcher used for
    nested statement bodies; ``depth`` counts how many IF bodies enclose
    the statement currently being rendered.
    """

    fragments: FragmentRenderer
    settings: Settings
    render_program: Callable[[Program, RenderContext], str]
    depth: int = 0

    def nested(self) -> RenderContext:
        """Return a context one IF level deeper.

        Raises:
            NestingDepthError: If the new depth exceeds
                ``settings.max_nesting_depth``.
        """
        depth = self.depth + 1
        if depth > self.settings.max_nesting_depth:
            raise NestingDepthError(
                f"IF nesting depth {depth} exceeds the configured maximum "
                f"of {self.settings.max_nesting_depth}"
            )
        return replace(self, depth=depth)


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class RenderError(Exception):
    """Base exception for all renderer errors."""


class UnsupportedKeywordError(RenderError):
    """An object keyword has no rendering rule (raised in strict mode only)."""

    def __init__(self, statement: str, keyword: str | None) -> None:
        super().__init__(f"{statement} does not support object keyword {keyword!r}")
        self.statement = statement
        self.keyword = keyword


class NestingDepthError(RenderError):
    """IF / ELSE bodies are nested deeper than the configured bound."""


class UnsupportedStatementError(RenderError):
    """No renderer is registered for a statement node's kind."""


class AstLoadError(RenderError):
    """A JSON AST could not be turned into statement nodes."""
