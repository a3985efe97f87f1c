"""Variation reconstruction from joined result sets.

One row of the variation join carries a variation, one of its alleles and
one of its synonyms. A variation with A alleles and S synonyms therefore
spans A x S rows. Hydration walks the rows once, starting a new Variation
whenever the variation key changes, and deduplicates alleles and synonyms
independently within each variation.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from variation_query.core.exceptions import ColumnMismatchError
from variation_query.mapping.memo import PopulationMemo
from variation_query.mapping.plan import VARIATION_PLAN, EntityPlan, HydrationPlan
from variation_query.mapping.protocol import PopulationLookup
from variation_query.models import Allele, Variation


def _extract_fields(row: dict[str, Any], plan: EntityPlan) -> dict[str, Any]:
    """Extract fields from a row using prefix and field map."""
    return {attr: row.get(plan.prefix + col) for attr, col in plan.field_map.items()}


def _check_columns(row: dict[str, Any], plan: HydrationPlan) -> None:
    missing = [col for col in plan.required_columns if col not in row]
    if missing:
        raise ColumnMismatchError(Variation.__name__, missing)


def parse_validation_states(value: str | None, delimiter: str = ",") -> set[str]:
    """Split a packed validation_status value into a set of states.

    >>> sorted(parse_validation_states("cluster,freq"))
    ['cluster', 'freq']
    """
    if not value:
        return set()
    return {state.strip() for state in value.split(delimiter) if state.strip()}


def hydrate_variations(
    rows: Iterable[dict[str, Any]],
    populations: PopulationMemo,
    plan: HydrationPlan = VARIATION_PLAN,
) -> list[Variation]:
    """Group joined rows into Variations.

    Rows must be contiguous per variation key; the function never re-sorts.
    A key that reappears after another key produces a second Variation
    object. Rows with a NULL variation key are skipped, as are NULL allele
    and synonym columns produced by outer joins.
    """
    variations: list[Variation] = []
    current: Variation | None = None
    current_key: Any = None
    seen_alleles: set[Any] = set()
    seen_synonyms: set[tuple[Any, Any]] = set()
    checked = False

    for row in rows:
        if not checked:
            _check_columns(row, plan)
            checked = True

        key = row.get(plan.variation.key_column)
        if key is None:
            continue

        if current is None or key != current_key:
            current = Variation(
                **_extract_fields(row, plan.variation),
                validation_states=parse_validation_states(
                    row.get(plan.validation_column), plan.validation_delimiter
                ),
            )
            variations.append(current)
            current_key = key
            seen_alleles = set()
            seen_synonyms = set()

        allele_key = row.get(plan.allele.key_column)
        if allele_key is not None and allele_key not in seen_alleles:
            seen_alleles.add(allele_key)
            current.add_allele(
                Allele(
                    **_extract_fields(row, plan.allele),
                    population=populations.get(row.get(plan.population_column)),
                )
            )

        # Synonyms repeat once per allele; checked on every row.
        synonym = _extract_fields(row, plan.synonym)
        if synonym["name"] is not None:
            synonym_key = (synonym["source"], synonym["name"])
            if synonym_key not in seen_synonyms:
                seen_synonyms.add(synonym_key)
                current.add_synonym(synonym["source"], synonym["name"])

    return variations


class VariationMapper:
    """Mapper producing Variations from rows of the variation join.

    Every ``map_many`` call is one hydration pass with its own
    PopulationMemo.
    """

    def __init__(
        self,
        populations: PopulationLookup,
        plan: HydrationPlan = VARIATION_PLAN,
    ) -> None:
        self._populations = populations
        self._plan = plan

    @property
    def plan(self) -> HydrationPlan:
        return self._plan

    def map_one(self, row: dict[str, Any]) -> Variation:
        """Not supported: a single row never holds a whole variation."""
        raise NotImplementedError(
            "VariationMapper.map_one is not supported. Use map_many for "
            "reconstruction from joined result sets."
        )

    def map_many(self, rows: Iterable[dict[str, Any]]) -> list[Variation]:
        return hydrate_variations(rows, PopulationMemo(self._populations), self._plan)
