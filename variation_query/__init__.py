"""variation-query - rebuild Variation objects from joined SQL result sets."""

from __future__ import annotations

from variation_query.core.config import AdaptorConfig
from variation_query.core.connection import ConnectionConfig, ConnectionManager
from variation_query.core.engine import Engine
from variation_query.core.exceptions import (
    AdapterError,
    ColumnMismatchError,
    ConnectionError,  # noqa: A004
    DuplicateQueryError,
    ExecutionError,
    InvalidArgumentError,
    MappingError,
    MultipleRowsError,
    QueryExecutionError,
    QueryNotFoundError,
    RegistryError,
    VariationQueryError,
)
from variation_query.core.registry import SQLRegistry
from variation_query.database import VariationDB
from variation_query.mapping import ModelMapper, PopulationMemo, VariationMapper
from variation_query.models import Allele, Population, Synonym, Variation
from variation_query.repository import NameResolver, PopulationAdaptor, VariationAdaptor

__all__ = [
    # Configuration
    "AdaptorConfig",
    "ConnectionConfig",
    "ConnectionManager",
    # Engine
    "Engine",
    "SQLRegistry",
    # Entry point
    "VariationDB",
    # Adaptors
    "VariationAdaptor",
    "PopulationAdaptor",
    "NameResolver",
    # Mapping
    "ModelMapper",
    "VariationMapper",
    "PopulationMemo",
    # Models
    "Variation",
    "Allele",
    "Synonym",
    "Population",
    # Exceptions
    "VariationQueryError",
    "InvalidArgumentError",
    "RegistryError",
    "QueryNotFoundError",
    "DuplicateQueryError",
    "ExecutionError",
    "QueryExecutionError",
    "MultipleRowsError",
    "MappingError",
    "ColumnMismatchError",
    "AdapterError",
    "ConnectionError",
]
