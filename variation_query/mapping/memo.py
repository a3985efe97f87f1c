"""Per-pass population memo."""

from __future__ import annotations

import logging

from variation_query.mapping.protocol import PopulationLookup
from variation_query.models import Population

logger = logging.getLogger(__name__)


class PopulationMemo:
    """Resolves population ids through ``lookup``, at most once per id.

    A memo belongs to a single hydration pass. Build a new one for every
    query; sharing one across calls could attach a stale population.
    Absent results are cached as well, so a missing population is looked up
    only once.
    """

    def __init__(self, lookup: PopulationLookup) -> None:
        self._lookup = lookup
        self._populations: dict[int, Population | None] = {}

    def get(self, population_id: int | None) -> Population | None:
        # 0 and NULL both mean "no population"
        if not population_id:
            return None
        if population_id in self._populations:
            return self._populations[population_id]

        logger.debug("Looking up population %s", population_id)
        population = self._lookup.fetch_by_dbid(population_id)
        self._populations[population_id] = population
        return population

    def __len__(self) -> int:
        return len(self._populations)

    def __contains__(self, population_id: object) -> bool:
        return population_id in self._populations
