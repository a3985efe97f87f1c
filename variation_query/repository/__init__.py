"""Repository layer - adaptors fetching domain objects."""

from __future__ import annotations

from variation_query.repository.base import Repository
from variation_query.repository.population import PopulationAdaptor
from variation_query.repository.resolver import NameResolver
from variation_query.repository.variation import VariationAdaptor

__all__ = [
    "Repository",
    "PopulationAdaptor",
    "VariationAdaptor",
    "NameResolver",
]
