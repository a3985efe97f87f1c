"""SQLite adapter, for fixtures and local snapshots of a variation schema."""

from __future__ import annotations

import sqlite3
from typing import Any

from variation_query.adapters.pool import ListPoolAdapter
from variation_query.core.connection import ConnectionConfig


class SqliteAdapter(ListPoolAdapter):
    paramstyle = "named"

    def connect(self, config: ConnectionConfig) -> sqlite3.Connection:
        # ``extra`` goes straight to sqlite3.connect (timeout, uri, ...)
        conn = sqlite3.connect(config.database, **config.extra)
        conn.row_factory = sqlite3.Row
        return conn

    def execute(
        self,
        connection: sqlite3.Connection,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> sqlite3.Cursor:
        return connection.execute(sql, params or {})
