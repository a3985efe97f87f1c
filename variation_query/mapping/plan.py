"""Column plans for variation hydration.

Frozen dataclasses describing where each entity's fields live in a joined
row. Column names are ``prefix + column``, matching the aliases used in the
packaged SQL (``variation__id``, ``allele__frequency``, ...).
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityPlan:
    """Mapping plan for one entity within a joined row."""

    prefix: str
    key_field: str
    field_map: dict[str, str]  # attribute_name -> column_name (without prefix)

    @property
    def key_column(self) -> str:
        return self.prefix + self.key_field

    @property
    def columns(self) -> list[str]:
        return [self.prefix + col for col in self.field_map.values()]


@dataclass(frozen=True)
class HydrationPlan:
    """Compiled layout of the variation/allele/synonym join."""

    variation: EntityPlan
    allele: EntityPlan
    synonym: EntityPlan
    validation_column: str
    population_column: str
    validation_delimiter: str = ","

    @property
    def required_columns(self) -> list[str]:
        return [
            *self.variation.columns,
            *self.allele.columns,
            *self.synonym.columns,
            self.validation_column,
            self.population_column,
        ]


VARIATION_PLAN = HydrationPlan(
    variation=EntityPlan(
        prefix="variation__",
        key_field="id",
        field_map={"dbid": "id", "name": "name", "source": "source"},
    ),
    allele=EntityPlan(
        prefix="allele__",
        key_field="id",
        field_map={"dbid": "id", "allele": "allele", "frequency": "frequency"},
    ),
    synonym=EntityPlan(
        prefix="synonym__",
        key_field="name",
        field_map={"name": "name", "source": "source"},
    ),
    validation_column="variation__validation_status",
    population_column="allele__population_id",
)
