"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any
from unittest.mock import MagicMock

import pytest

from variation_query.core.connection import ConnectionConfig, ConnectionManager
from variation_query.core.engine import Engine
from variation_query.core.registry import SQLRegistry
from variation_query.models import Population

SCHEMA = """
CREATE TABLE source (
    source_id INTEGER PRIMARY KEY,
    name TEXT NOT NULL
);
CREATE TABLE sample (
    sample_id INTEGER PRIMARY KEY,
    name TEXT NOT NULL,
    size INTEGER,
    description TEXT
);
CREATE TABLE population (
    sample_id INTEGER PRIMARY KEY
);
CREATE TABLE variation (
    variation_id INTEGER PRIMARY KEY,
    source_id INTEGER NOT NULL,
    name TEXT,
    validation_status TEXT
);
CREATE TABLE allele (
    allele_id INTEGER PRIMARY KEY,
    variation_id INTEGER NOT NULL,
    allele TEXT,
    frequency REAL,
    population_id INTEGER
);
CREATE TABLE variation_synonym (
    variation_synonym_id INTEGER PRIMARY KEY,
    variation_id INTEGER NOT NULL,
    source_id INTEGER NOT NULL,
    name TEXT
);
"""

SEED = """
INSERT INTO source VALUES (1, 'dbSNP'), (2, 'Affy'), (3, 'HGVbase');
INSERT INTO sample VALUES
    (10, 'PACIFIC', 20, 'Pacific islanders'),
    (11, 'NUSPAE:Singapore_HDL', 48, NULL);
INSERT INTO population VALUES (10), (11);
INSERT INTO variation VALUES
    (5526, 1, 'rs100', 'cluster,freq'),
    (5527, 1, 'rs200', NULL),
    (5528, 1, 'rs300', 'submitter');
INSERT INTO allele VALUES
    (10, 5526, 'A', 0.6, 10),
    (11, 5526, 'G', 0.4, 10),
    (12, 5527, 'C', NULL, 0),
    (13, 5528, 'T', 0.25, 11),
    (14, 5528, 'C', 0.75, 10);
INSERT INTO variation_synonym VALUES
    (1, 5526, 2, 'SNP_A-1'),
    (2, 5526, 3, 'HGVB:5'),
    (3, 5526, 1, 'ss123'),
    (4, 5528, 1, 'rs299');
"""


@pytest.fixture
def sqlite_config() -> ConnectionConfig:
    """SQLite in-memory connection config."""
    return ConnectionConfig(driver="sqlite", database=":memory:", pool_size=1)


@pytest.fixture
def tmp_sql_dir(tmp_path: Path) -> Path:
    """Temporary directory for SQL files."""
    return tmp_path / "sql"


@pytest.fixture
def write_sql(tmp_sql_dir: Path):
    """Helper to write SQL files into the temp directory.

    Usage:
        write_sql("variation/get.sql", "SELECT * FROM variation WHERE variation_id = :id")
    """

    def _write(relative_path: str, content: str) -> Path:
        file_path = tmp_sql_dir / relative_path
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(content, encoding="utf-8")
        return file_path

    return _write


@pytest.fixture
def variation_engine(sqlite_config: ConnectionConfig) -> Iterator[Engine]:
    """Engine over a seeded in-memory variation schema and the packaged SQL."""
    manager = ConnectionManager(sqlite_config)
    with manager.get_connection() as conn:
        conn.executescript(SCHEMA)
        conn.executescript(SEED)
    engine = Engine(manager, SQLRegistry())
    yield engine
    engine.close()


@pytest.fixture
def make_row():
    """Build one row of the variation join with overridable columns."""

    def _row(
        variation_id: int | None = 5526,
        allele_id: int | None = 10,
        synonym: str | None = "ss123",
        synonym_source: str | None = "dbSNP",
        *,
        name: str = "rs100",
        status: str | None = "cluster,freq",
        source: str = "dbSNP",
        allele: str = "A",
        frequency: float | None = 0.5,
        population_id: int | None = None,
    ) -> dict[str, Any]:
        return {
            "variation__id": variation_id,
            "variation__name": name,
            "variation__validation_status": status,
            "variation__source": source,
            "allele__id": allele_id,
            "allele__allele": allele,
            "allele__frequency": frequency,
            "allele__population_id": population_id,
            "synonym__name": synonym,
            "synonym__source": synonym_source,
        }

    return _row


@pytest.fixture
def population_lookup() -> MagicMock:
    """Stub PopulationLookup returning a fresh Population per call."""
    lookup = MagicMock()
    lookup.fetch_by_dbid.side_effect = lambda dbid: Population(dbid=dbid, name=f"POP{dbid}")
    return lookup
