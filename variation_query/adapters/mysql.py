"""MySQL adapter using mysql-connector-python.

MySQL is the native home of the variation schema; ``validation_status`` is
a SET column and comes back as a comma-joined string.
"""

from __future__ import annotations

from typing import Any

from variation_query.adapters.pool import ListPoolAdapter
from variation_query.core.connection import ConnectionConfig

DEFAULT_PORT = 3306


class MysqlAdapter(ListPoolAdapter):
    def connect(self, config: ConnectionConfig) -> Any:
        import mysql.connector

        return mysql.connector.connect(
            host=config.host,
            port=config.port or DEFAULT_PORT,
            user=config.user,
            password=config.password,
            database=config.database,
            **config.extra,
        )

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        # Buffered so every row is read before the connection goes back to the pool
        cursor = connection.cursor(dictionary=True, buffered=True)
        cursor.execute(sql, params or {})
        return cursor
