"""Query execution engine.

The Engine resolves named queries from the SQLRegistry, binds parameters,
executes through the adapter, and optionally applies a mapper to results.
"""

from __future__ import annotations

import logging
from typing import Any

from variation_query.core.connection import ConnectionConfig, ConnectionManager
from variation_query.core.exceptions import MultipleRowsError, QueryExecutionError
from variation_query.core.params import normalize_params
from variation_query.core.registry import SQLRegistry

logger = logging.getLogger(__name__)


def _rows_to_dicts(cursor: Any) -> list[dict[str, Any]]:
    """Convert cursor results to list of dicts.

    Handles both tuple-like rows and dict-like rows from different adapters.
    """
    if cursor.description is None:
        return []
    columns = [desc[0] for desc in cursor.description]
    rows = cursor.fetchall()
    if not rows:
        return []

    # MySQL dictionary cursors and psycopg dict_row already yield dicts
    if isinstance(rows[0], dict):
        return [dict(row) for row in rows]

    return [dict(zip(columns, row, strict=True)) for row in rows]


class Engine:
    """Synchronous query execution engine."""

    def __init__(
        self,
        connection_manager: ConnectionManager,
        registry: SQLRegistry | None = None,
    ) -> None:
        self._connection_manager = connection_manager
        self._registry = registry if registry is not None else SQLRegistry()
        self._paramstyle = connection_manager.adapter.paramstyle

    @classmethod
    def from_config(
        cls,
        config: ConnectionConfig,
        registry: SQLRegistry | None = None,
    ) -> Engine:
        """Create an Engine from a ConnectionConfig and optional SQLRegistry."""
        return cls(ConnectionManager(config), registry)

    @property
    def registry(self) -> SQLRegistry:
        return self._registry

    @property
    def connection_manager(self) -> ConnectionManager:
        return self._connection_manager

    def _run(
        self,
        query_name: str,
        params: dict[str, Any] | None,
        fragments: dict[str, str] | None,
    ) -> list[dict[str, Any]]:
        sql = self._registry.render(query_name, **(fragments or {}))
        sql = normalize_params(sql, self._paramstyle)
        logger.debug("Executing %s with %d parameter(s)", query_name, len(params or {}))

        # Connection failures count as execution failures too
        try:
            with self._connection_manager.get_connection() as conn:
                cursor = self._connection_manager.adapter.execute(conn, sql, params)
                return _rows_to_dicts(cursor)
        except Exception as e:
            raise QueryExecutionError(query_name, str(e)) from e

    def fetch_one(
        self,
        query_name: str,
        params: dict[str, Any] | None = None,
        *,
        mapper: Any | None = None,
    ) -> Any:
        """Fetch a single row.

        Returns None if zero rows match.
        Raises MultipleRowsError if more than one row matches.
        """
        rows = self._run(query_name, params, None)

        if len(rows) == 0:
            return None
        if len(rows) > 1:
            raise MultipleRowsError(query_name, len(rows))

        row = rows[0]
        if mapper is not None:
            return mapper.map_one(row)
        return row

    def fetch_all(
        self,
        query_name: str,
        params: dict[str, Any] | None = None,
        *,
        mapper: Any | None = None,
        fragments: dict[str, str] | None = None,
    ) -> Any:
        """Fetch all matching rows, in the order the database returns them.

        ``fragments`` fill ``{placeholder}`` slots in the registered SQL
        before parameter normalization.
        """
        rows = self._run(query_name, params, fragments)

        if mapper is not None:
            return mapper.map_many(rows)
        return rows

    def close(self) -> None:
        """Close all pooled connections."""
        self._connection_manager.close_pool()
