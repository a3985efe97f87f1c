"""Unit tests for NameResolver."""

from __future__ import annotations

import logging
from unittest.mock import MagicMock

import pytest

from variation_query.core.exceptions import QueryExecutionError
from variation_query.mapping.hydrator import VariationMapper
from variation_query.repository.resolver import NameResolver


@pytest.fixture
def engine() -> MagicMock:
    return MagicMock()


@pytest.fixture
def resolver(engine: MagicMock, population_lookup) -> NameResolver:
    return NameResolver(engine, VariationMapper(population_lookup))


def _route(**results):
    """fetch_all side effect returning raw rows per query, mapped by the mapper."""

    def _fetch_all(query_name, params, *, mapper):
        return mapper.map_many(results.get(query_name.split(".")[1], []))

    return _fetch_all


class TestNameResolver:
    def test_direct_match(self, resolver, engine, make_row) -> None:
        engine.fetch_all.side_effect = _route(fetch_by_name=[make_row(5526, 10)])

        var = resolver.resolve("rs100")

        assert var is not None
        assert var.dbid == 5526
        engine.fetch_all.assert_called_once()
        assert engine.fetch_all.call_args.args == ("variation.fetch_by_name", {"name": "rs100"})

    def test_falls_back_to_synonym(self, resolver, engine, make_row, caplog) -> None:
        engine.fetch_all.side_effect = _route(
            fetch_by_synonym=[make_row(5526, 10, "ss123"), make_row(5526, 10, "SNP_A-1", "Affy")]
        )

        with caplog.at_level(logging.DEBUG, logger="variation_query.repository.resolver"):
            var = resolver.resolve("ss123")

        assert var is not None
        assert var.name == "rs100"
        assert var.get_all_synonyms() == ["ss123", "SNP_A-1"]
        queries = [call.args[0] for call in engine.fetch_all.call_args_list]
        assert queries == ["variation.fetch_by_name", "variation.fetch_by_synonym"]
        assert "trying synonyms" in caplog.text

    def test_not_found(self, resolver, engine) -> None:
        engine.fetch_all.side_effect = _route()
        assert resolver.resolve("rs0") is None
        assert engine.fetch_all.call_count == 2

    def test_returns_first_of_several(self, resolver, engine, make_row) -> None:
        engine.fetch_all.side_effect = _route(
            fetch_by_name=[make_row(1, 10, name="dup"), make_row(2, 20, name="dup")]
        )
        assert resolver.resolve("dup").dbid == 1

    def test_direct_failure_skips_fallback(self, resolver, engine) -> None:
        engine.fetch_all.side_effect = QueryExecutionError("variation.fetch_by_name", "boom")
        with pytest.raises(QueryExecutionError):
            resolver.resolve("rs100")
        engine.fetch_all.assert_called_once()
