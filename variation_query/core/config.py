"""Adaptor configuration."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_MAX_BATCH_SIZE = 200


class AdaptorConfig(BaseModel):
    """Tunables for the variation adaptor.

    Attributes:
        max_batch_size: Upper bound on identifiers bound into a single
            ``IN (...)`` predicate by ``fetch_all_by_dbid_list``.
        validation_state_delimiter: Separator of the packed
            ``validation_status`` column.
        sql_dir: Directory of ``.sql`` files to load instead of the
            packaged queries.
    """

    max_batch_size: int = Field(default=DEFAULT_MAX_BATCH_SIZE, gt=0)
    validation_state_delimiter: str = Field(default=",", min_length=1)
    sql_dir: Path | None = None
