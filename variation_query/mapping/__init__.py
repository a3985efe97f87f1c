"""Mapping layer - transform joined rows into domain objects."""

from __future__ import annotations

from variation_query.mapping.hydrator import (
    VariationMapper,
    hydrate_variations,
    parse_validation_states,
)
from variation_query.mapping.memo import PopulationMemo
from variation_query.mapping.model import ModelMapper
from variation_query.mapping.plan import VARIATION_PLAN, EntityPlan, HydrationPlan

__all__ = [
    "ModelMapper",
    "VariationMapper",
    "PopulationMemo",
    "hydrate_variations",
    "parse_validation_states",
    "EntityPlan",
    "HydrationPlan",
    "VARIATION_PLAN",
]
