"""Variation lookup by name with synonym fallback."""

from __future__ import annotations

import logging
from typing import Any

from variation_query.models import Variation

logger = logging.getLogger(__name__)


class NameResolver:
    """Resolves a variation name in two attempts.

    1. ``variation.fetch_by_name`` matches the variation's own name.
    2. Only if that finds nothing, ``variation.fetch_by_synonym`` matches
       a recorded synonym and loads the owning variation.

    Both queries share the column layout of the primary join, so the same
    mapper hydrates either result. Only the first variation is returned;
    names are assumed unique but this is not checked.
    """

    DIRECT_QUERY = "variation.fetch_by_name"
    SYNONYM_QUERY = "variation.fetch_by_synonym"

    def __init__(self, engine: Any, mapper: Any) -> None:
        self._engine = engine
        self._mapper = mapper

    def _first(self, query_name: str, name: str) -> Variation | None:
        variations = self._engine.fetch_all(query_name, {"name": name}, mapper=self._mapper)
        return variations[0] if variations else None

    def resolve(self, name: str) -> Variation | None:
        variation = self._first(self.DIRECT_QUERY, name)
        if variation is not None:
            return variation

        logger.debug("No variation named %r, trying synonyms", name)
        variation = self._first(self.SYNONYM_QUERY, name)
        if variation is None:
            logger.debug("No variation or synonym named %r", name)
        return variation
