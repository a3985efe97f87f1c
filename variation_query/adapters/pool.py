"""Plain list pool shared by the synchronous adapters.

Subclasses supply ``connect`` and ``execute``; the pool is a list of open
connections, popped on acquire and pushed back on release.
"""

from __future__ import annotations

from typing import Any

from variation_query.core.connection import ConnectionConfig
from variation_query.core.exceptions import ConnectionError


class ListPoolAdapter:
    paramstyle = "pyformat"

    def connect(self, config: ConnectionConfig) -> Any:
        raise NotImplementedError

    def create_pool(self, config: ConnectionConfig) -> list[Any]:
        return [self.connect(config) for _ in range(config.pool_size)]

    def acquire_connection(self, pool: list[Any]) -> Any:
        if not pool:
            raise ConnectionError("No connections available in pool")
        return pool.pop()

    def release_connection(self, connection: Any, pool: list[Any]) -> None:
        pool.append(connection)

    def close_pool(self, pool: list[Any]) -> None:
        while pool:
            pool.pop().close()
