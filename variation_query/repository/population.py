"""Population lookups."""

from __future__ import annotations

from typing import Any

from variation_query.mapping.model import ModelMapper
from variation_query.models import Population
from variation_query.repository.base import Repository, require_dbid


class PopulationAdaptor(Repository[Population]):
    """Engine-backed PopulationLookup."""

    def __init__(self, engine: Any) -> None:
        super().__init__(engine, ModelMapper(Population))

    def fetch_by_dbid(self, dbid: int) -> Population | None:
        """Fetch one population by its identifier, or None."""
        require_dbid(dbid)
        return self.engine.fetch_one(  # type: ignore[no-any-return]
            "population.fetch_by_dbid", {"population_id": dbid}, mapper=self.mapper
        )
