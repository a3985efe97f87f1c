"""
Example 01: Fetching Variations

Builds a small variation database in a temporary SQLite file and fetches
variations by identifier, by name, by synonym and in bulk.
"""

import logging
import sqlite3
import tempfile
from pathlib import Path

from variation_query import AdaptorConfig, ConnectionConfig, VariationDB


def build_database(db_path: str) -> None:
    conn = sqlite3.connect(db_path)
    conn.executescript("""
        CREATE TABLE source (source_id INTEGER PRIMARY KEY, name TEXT NOT NULL);
        CREATE TABLE sample (
            sample_id INTEGER PRIMARY KEY, name TEXT NOT NULL, size INTEGER, description TEXT
        );
        CREATE TABLE population (sample_id INTEGER PRIMARY KEY);
        CREATE TABLE variation (
            variation_id INTEGER PRIMARY KEY, source_id INTEGER, name TEXT, validation_status TEXT
        );
        CREATE TABLE allele (
            allele_id INTEGER PRIMARY KEY, variation_id INTEGER, allele TEXT,
            frequency REAL, population_id INTEGER
        );
        CREATE TABLE variation_synonym (
            variation_synonym_id INTEGER PRIMARY KEY, variation_id INTEGER,
            source_id INTEGER, name TEXT
        );

        INSERT INTO source VALUES (1, 'dbSNP'), (2, 'Affy');
        INSERT INTO sample VALUES (10, 'PACIFIC', 20, 'Pacific islanders');
        INSERT INTO population VALUES (10);
        INSERT INTO variation VALUES (145, 1, 'rs100', 'cluster,freq'), (146, 1, 'rs101', NULL);
        INSERT INTO allele VALUES
            (1, 145, 'A', 0.7, 10), (2, 145, 'G', 0.3, 10), (3, 146, 'T', NULL, NULL);
        INSERT INTO variation_synonym VALUES (1, 145, 2, 'SNP_A-8575395'), (2, 145, 1, 'ss24');
    """)
    conn.close()


def main():
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    db_file = tempfile.NamedTemporaryFile(delete=False, suffix=".db")
    db_path = db_file.name
    db_file.close()
    build_database(db_path)

    config = ConnectionConfig(driver="sqlite", database=db_path)
    with VariationDB.from_config(config, AdaptorConfig(max_batch_size=1)) as db:
        adaptor = db.get_variation_adaptor()

        print("=== fetch_by_dbid ===\n")
        var = adaptor.fetch_by_dbid(145)
        print(f"{var.name} ({var.source}) validated by {sorted(var.validation_states)}")
        for allele in var.alleles:
            pop = allele.population.name if allele.population else "-"
            print(f"  allele {allele.allele} freq={allele.frequency} population={pop}")
        for source in var.get_all_synonym_sources():
            print(f"  {source} synonyms: {var.get_all_synonyms(source)}")

        print("\n=== fetch_by_name (via synonym) ===\n")
        var = adaptor.fetch_by_name("SNP_A-8575395")
        print(f"SNP_A-8575395 -> {var.name}")

        print("\n=== fetch_all_by_dbid_list (one id per query) ===\n")
        for var in adaptor.fetch_all_by_dbid_list([145, 146, 999]):
            print(f"{var.dbid}: {var.name} with {len(var.alleles)} allele(s)")

    Path(db_path).unlink()


if __name__ == "__main__":
    main()
