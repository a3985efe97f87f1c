"""Mapper and lookup protocols.

Mappers turn row dicts into domain objects; the Engine calls map_one for
fetch_one results and map_many for fetch_all results.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from variation_query.models import Population

T = TypeVar("T")


class Mapper(Protocol[T]):
    """Base mapper protocol."""

    def map_one(self, row: dict[str, Any]) -> T:
        """Map a single row dict to a target object."""
        ...

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        """Map multiple row dicts to a list of target objects."""
        ...


class PopulationLookup(Protocol):
    """Resolves a population by its database identifier."""

    def fetch_by_dbid(self, dbid: int) -> Population | None:
        """Return the population, or None when no such population exists."""
        ...
