"""Fragment renderer implementations."""

from .sqlglot_fragments import SqlGlotFragmentRenderer

__all__ = ["SqlGlotFragmentRenderer"]
