"""Bounded batch fetching.

Large identifier lists are split into chunks so no single query binds more
than ``max_size`` identifiers. Rows from every chunk are collected before
anything is returned, so a failing chunk leaves the caller with nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from typing import Any

from variation_query.core.config import DEFAULT_MAX_BATCH_SIZE
from variation_query.core.params import build_id_predicate

logger = logging.getLogger(__name__)


def chunk_ids(ids: Sequence[int], max_size: int = DEFAULT_MAX_BATCH_SIZE) -> Iterator[list[int]]:
    """Yield consecutive slices of ``ids`` no longer than ``max_size``."""
    if max_size < 1:
        raise ValueError(f"max_size must be positive, got {max_size}")
    for start in range(0, len(ids), max_size):
        yield list(ids[start : start + max_size])


def fetch_in_batches(
    engine: Any,
    query_name: str,
    ids: Sequence[int],
    *,
    param: str,
    max_size: int = DEFAULT_MAX_BATCH_SIZE,
) -> list[dict[str, Any]]:
    """Run ``query_name`` once per chunk of ``ids`` and concatenate the rows.

    The registered SQL must contain an ``{id_predicate}`` slot, which is
    filled with ``= :param`` for a one-element chunk and ``IN (...)``
    otherwise. An empty ``ids`` issues no query.
    """
    rows: list[dict[str, Any]] = []
    n_chunks = 0
    for chunk in chunk_ids(ids, max_size):
        predicate, params = build_id_predicate(param, chunk)
        rows.extend(
            engine.fetch_all(query_name, params, fragments={"id_predicate": predicate})
        )
        n_chunks += 1

    logger.debug(
        "Fetched %d row(s) for %d id(s) in %d chunk(s) of %s",
        len(rows),
        len(ids),
        n_chunks,
        query_name,
    )
    return rows
