"""PostgreSQL adapter using psycopg 3.

Connections run in autocommit mode; every query issued here is a read.
"""

from __future__ import annotations

from typing import Any

from variation_query.adapters.pool import ListPoolAdapter
from variation_query.core.connection import ConnectionConfig


def _build_conninfo(config: ConnectionConfig) -> str:
    keys = {
        "host": config.host,
        "port": config.port,
        "user": config.user,
        "password": config.password,
        "dbname": config.database,
    }
    return " ".join(f"{key}={value}" for key, value in keys.items() if value is not None)


class PostgresqlAdapter(ListPoolAdapter):
    def connect(self, config: ConnectionConfig) -> Any:
        import psycopg
        from psycopg.rows import dict_row

        return psycopg.connect(_build_conninfo(config), row_factory=dict_row, autocommit=True)

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return connection.execute(sql, params or {})
