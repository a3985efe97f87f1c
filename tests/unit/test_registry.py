"""Unit tests for SQLRegistry."""

from __future__ import annotations

from pathlib import Path

import pytest

from variation_query.core.exceptions import QueryNotFoundError
from variation_query.core.registry import SQLRegistry


class TestSQLRegistry:
    def test_load_directory(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("variation/get.sql", "SELECT * FROM variation WHERE variation_id = :id")
        write_sql("variation/list.sql", "SELECT * FROM variation")
        registry = SQLRegistry(tmp_sql_dir)
        assert len(registry) == 2

    def test_dot_separated_namespace(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("population/get.sql", "SELECT 1")
        registry = SQLRegistry(tmp_sql_dir)
        assert registry.has("population.get")
        assert registry.get("population.get") == "SELECT 1"

    def test_text_is_stripped(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("a.sql", "\n  SELECT 1\n\n")
        assert SQLRegistry(tmp_sql_dir).get("a") == "SELECT 1"

    def test_query_names_sorted(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("b/query.sql", "SELECT 1")
        write_sql("a/query.sql", "SELECT 2")
        registry = SQLRegistry(tmp_sql_dir)
        assert registry.query_names == ["a.query", "b.query"]

    def test_query_not_found_error(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("variation/list.sql", "SELECT 1")
        registry = SQLRegistry(tmp_sql_dir)
        with pytest.raises(QueryNotFoundError, match="missing.query"):
            registry.get("missing.query")

    def test_missing_directory_is_empty(self, tmp_path: Path) -> None:
        assert len(SQLRegistry(tmp_path / "nope")) == 0

    def test_ignores_non_sql_files(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("variation/list.sql", "SELECT 1")
        write_sql("variation/README.md", "not sql")
        assert len(SQLRegistry(tmp_sql_dir)) == 1

    def test_render_fills_fragments(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("v/list.sql", "SELECT * FROM variation WHERE variation_id {id_predicate}")
        registry = SQLRegistry(tmp_sql_dir)
        assert (
            registry.render("v.list", id_predicate="= :vid")
            == "SELECT * FROM variation WHERE variation_id = :vid"
        )

    def test_render_without_fragments_returns_text(self, tmp_sql_dir: Path, write_sql) -> None:
        write_sql("v/get.sql", "SELECT 1")
        assert SQLRegistry(tmp_sql_dir).render("v.get") == "SELECT 1"


class TestPackagedQueries:
    def test_default_registry_has_variation_queries(self) -> None:
        registry = SQLRegistry()
        assert {
            "variation.fetch_by_dbid",
            "variation.fetch_by_name",
            "variation.fetch_by_synonym",
            "variation.fetch_all_by_dbid_list",
            "population.fetch_by_dbid",
        } <= set(registry.query_names)

    def test_list_query_has_predicate_slot(self) -> None:
        assert "{id_predicate}" in SQLRegistry().get("variation.fetch_all_by_dbid_list")

    def test_name_queries_order_by_allele(self) -> None:
        registry = SQLRegistry()
        for name in ("variation.fetch_by_name", "variation.fetch_by_synonym"):
            assert "a.allele_id" in registry.get(name).split("ORDER BY")[1]
