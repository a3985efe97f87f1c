"""variation-query exception hierarchy.

Raw driver exceptions are never exposed to callers; they are wrapped in
ExecutionError subclasses with the original chained as ``__cause__``.
"""

from __future__ import annotations


class VariationQueryError(Exception):
    """Base exception for all variation-query errors."""


class InvalidArgumentError(VariationQueryError, ValueError):
    """Raised when a required argument is absent or malformed.

    Always raised before any query is executed.
    """

    def __init__(self, argument: str, detail: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid argument '{argument}': {detail}")


# --- Registry ---


class RegistryError(VariationQueryError):
    """Base for SQL registry errors."""


class QueryNotFoundError(RegistryError):
    """Raised when a named query cannot be found in the registry."""

    def __init__(self, query_name: str) -> None:
        self.query_name = query_name
        super().__init__(f"Query not found: '{query_name}'")


class DuplicateQueryError(RegistryError):
    """Raised when two SQL files resolve to the same namespace key."""

    def __init__(self, query_name: str, path_a: str, path_b: str) -> None:
        self.query_name = query_name
        super().__init__(f"Duplicate query name '{query_name}': {path_a} and {path_b}")


# --- Execution ---


class ExecutionError(VariationQueryError):
    """Base for query execution errors."""


class QueryExecutionError(ExecutionError):
    """Raised when the database driver fails to execute a query."""

    def __init__(self, query_name: str, detail: str) -> None:
        self.query_name = query_name
        super().__init__(f"Execution of '{query_name}' failed: {detail}")


class MultipleRowsError(ExecutionError):
    """Raised when fetch_one encounters more than one row."""

    def __init__(self, query_name: str, row_count: int) -> None:
        self.query_name = query_name
        self.row_count = row_count
        super().__init__(
            f"fetch_one for '{query_name}' returned {row_count} rows (expected 0 or 1)"
        )


# --- Mapping ---


class MappingError(VariationQueryError):
    """Base for mapping errors."""


class ColumnMismatchError(MappingError):
    """Raised when required fields cannot be mapped from row columns."""

    def __init__(self, target_class: str, missing_fields: list[str]) -> None:
        self.target_class = target_class
        self.missing_fields = missing_fields
        super().__init__(f"Cannot map to {target_class}: missing fields {missing_fields}")


# --- Adapter ---


class AdapterError(VariationQueryError):
    """Base for adapter errors."""


class ConnectionError(AdapterError):  # noqa: A001
    """Raised on connection failures."""
