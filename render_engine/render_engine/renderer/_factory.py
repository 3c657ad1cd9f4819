"""Fragment renderer factory.

Provides :func:`get_fragment_renderer` -- the single entry point for
statement renderers and the dispatcher.  Thread-safe, one cached instance
per dialect, with a configurable implementation backend.
"""

from __future__ import annotations

import threading
from typing import Callable

from render_engine.config import Dialect

from ._protocols import FragmentRenderer

_lock = threading.Lock()
_instances: dict[Dialect, FragmentRenderer] = {}
_factory_fn: Callable[[Dialect], FragmentRenderer] | None = None


def register_implementation(factory_fn: Callable[[Dialect], FragmentRenderer]) -> None:
    """Register a factory function for creating :class:`FragmentRenderer` instances.

    Called once at application startup.  If not called, the default SQLGlot
    implementation is used.
    """
    global _factory_fn
    with _lock:
        _factory_fn = factory_fn
        _instances.clear()  # force re-creation on next access


def get_fragment_renderer(dialect: Dialect = Dialect.MYSQL) -> FragmentRenderer:
    """Return the active :class:`FragmentRenderer` for *dialect*.

    Thread-safe.  Lazily instantiated on first call per dialect.  Defaults
    to the SQLGlot-backed implementation if no custom factory has been
    registered.
    """
    instance = _instances.get(dialect)
    if instance is not None:
        return instance

    with _lock:
        # Double-checked locking
        instance = _instances.get(dialect)
        if instance is not None:
            return instance

        if _factory_fn is not None:
            instance = _factory_fn(dialect)
        else:
            from .impl.sqlglot_fragments import SqlGlotFragmentRenderer

            instance = SqlGlotFragmentRenderer(dialect)

        _instances[dialect] = instance
        return instance


def reset_renderer() -> None:
    """Reset cached instances and the registered factory.  **For testing only.**"""
    global _factory_fn
    with _lock:
        _instances.clear()
        _factory_fn = None
