"""Tests for the fragment renderer factory and per-dialect caching."""

from __future__ import annotations

import threading

from render_engine.config import Dialect
from render_engine.renderer import get_fragment_renderer, register_implementation, reset_renderer
from render_engine.renderer._protocols import FragmentRenderer
from render_engine.renderer.impl.sqlglot_fragments import SqlGlotFragmentRenderer


class TestFactory:
    """Factory function and cached instance lifecycle."""

    def setup_method(self) -> None:
        reset_renderer()

    def teardown_method(self) -> None:
        reset_renderer()

    def test_default_is_sqlglot(self) -> None:
        renderer = get_fragment_renderer()
        assert isinstance(renderer, SqlGlotFragmentRenderer)
        assert renderer.dialect == Dialect.MYSQL

    def test_instance_cached_per_dialect(self) -> None:
        assert get_fragment_renderer(Dialect.MYSQL) is get_fragment_renderer(Dialect.MYSQL)

    def test_dialects_get_distinct_instances(self) -> None:
        mysql = get_fragment_renderer(Dialect.MYSQL)
        postgres = get_fragment_renderer(Dialect.POSTGRES)
        assert mysql is not postgres
        assert postgres.dialect == Dialect.POSTGRES

    def test_reset_clears_cache(self) -> None:
        r1 = get_fragment_renderer()
        reset_renderer()
        r2 = get_fragment_renderer()
        assert r1 is not r2

    def test_register_custom_implementation(self) -> None:
        seen: list[Dialect] = []

        def _factory(dialect: Dialect) -> FragmentRenderer:
            seen.append(dialect)
            return SqlGlotFragmentRenderer(dialect)

        register_implementation(_factory)
        renderer = get_fragment_renderer(Dialect.TSQL)
        assert renderer.dialect == Dialect.TSQL
        assert seen == [Dialect.TSQL]

        get_fragment_renderer(Dialect.TSQL)
        assert seen == [Dialect.TSQL]

    def test_register_replaces_existing(self) -> None:
        r1 = get_fragment_renderer()
        register_implementation(SqlGlotFragmentRenderer)
        r2 = get_fragment_renderer()
        assert r2 is not r1

    def test_thread_safety(self) -> None:
        """Multiple threads calling get_fragment_renderer() get the same instance."""
        results: list[object] = []
        barrier = threading.Barrier(10)

        def _get() -> None:
            barrier.wait()
            results.append(get_fragment_renderer())

        threads = [threading.Thread(target=_get) for _ in range(10)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(results) == 10
        assert all(r is results[0] for r in results)

    def test_protocol_compliance(self) -> None:
        """SqlGlotFragmentRenderer satisfies the FragmentRenderer protocol at runtime."""
        assert isinstance(get_fragment_renderer(), FragmentRenderer)
