"""Database adapter protocol driven by the Engine's ConnectionManager."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from variation_query.core.connection import ConnectionConfig


@runtime_checkable
class SyncAdapter(Protocol):
    @property
    def paramstyle(self) -> str:
        """'named' (:name) or 'pyformat' (%(name)s)."""
        ...

    def create_pool(self, config: ConnectionConfig) -> Any: ...

    def acquire_connection(self, pool: Any) -> Any: ...

    def release_connection(self, connection: Any, pool: Any) -> None: ...

    def close_pool(self, pool: Any) -> None: ...

    def execute(
        self,
        connection: Any,
        sql: str,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Run ``sql`` and return a cursor-like object with ``description``."""
        ...
