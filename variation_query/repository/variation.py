"""Variation adaptor."""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from typing import Any

from variation_query.core.batch import fetch_in_batches
from variation_query.core.config import AdaptorConfig
from variation_query.core.exceptions import InvalidArgumentError
from variation_query.mapping.hydrator import VariationMapper
from variation_query.mapping.plan import VARIATION_PLAN
from variation_query.mapping.protocol import PopulationLookup
from variation_query.models import Variation
from variation_query.repository.base import Repository, require_dbid, require_name
from variation_query.repository.resolver import NameResolver


class VariationAdaptor(Repository[Variation]):
    """Fetches Variations with their alleles, populations and synonyms.

    Example:
        >>> adaptor = VariationAdaptor(engine, PopulationAdaptor(engine))
        >>> var = adaptor.fetch_by_dbid(5526)
        >>> var = adaptor.fetch_by_name("rs100")
        >>> variations = adaptor.fetch_all_by_dbid_list([124, 56, 90])

    Args:
        engine: Engine executing the packaged ``variation.*`` queries.
        populations: Lookup used to resolve allele populations.
        config: Batch size and parsing options.
    """

    def __init__(
        self,
        engine: Any,
        populations: PopulationLookup,
        config: AdaptorConfig | None = None,
    ) -> None:
        self.config = config or AdaptorConfig()
        plan = dataclasses.replace(
            VARIATION_PLAN, validation_delimiter=self.config.validation_state_delimiter
        )
        super().__init__(engine, VariationMapper(populations, plan))
        self.name_resolver = NameResolver(engine, self.mapper)

    def fetch_by_dbid(self, dbid: int) -> Variation | None:
        """Fetch a variation by its internal identifier, or None.

        Raises:
            InvalidArgumentError: If ``dbid`` is missing or not an integer.
        """
        require_dbid(dbid)
        variations = self.engine.fetch_all(
            "variation.fetch_by_dbid", {"variation_id": dbid}, mapper=self.mapper
        )
        return variations[0] if variations else None

    def fetch_by_name(self, name: str) -> Variation | None:
        """Fetch a variation by name, falling back to its synonyms, or None.

        Raises:
            InvalidArgumentError: If ``name`` is missing or not a string.
        """
        require_name(name)
        return self.name_resolver.resolve(name)

    def fetch_all_by_dbid_list(self, dbids: Sequence[int]) -> list[Variation]:
        """Fetch many variations, at most ``config.max_batch_size`` ids per query.

        Ids with no variation are silently absent from the result. The
        input sequence is not modified. Any failing chunk aborts the whole
        call.

        Raises:
            InvalidArgumentError: If ``dbids`` is not a sequence of integers.
        """
        if not isinstance(dbids, Sequence) or isinstance(dbids, (str, bytes)):
            raise InvalidArgumentError("dbids", "sequence of identifiers is required")
        for dbid in dbids:
            require_dbid(dbid, "dbids")
        if not dbids:
            return []

        rows = fetch_in_batches(
            self.engine,
            "variation.fetch_all_by_dbid_list",
            dbids,
            param="variation_id",
            max_size=self.config.max_batch_size,
        )
        return self.mapper.map_many(rows)  # type: ignore[union-attr]
