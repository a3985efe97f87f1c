"""Flat row-to-dataclass mapper, for lookups where one row is one object."""

from __future__ import annotations

import dataclasses
from typing import Any, Generic, TypeVar

from variation_query.core.exceptions import ColumnMismatchError

T = TypeVar("T")


class ModelMapper(Generic[T]):
    """Builds ``target_class(**row)`` for a dataclass.

    Columns without a matching field are dropped, so queries may select
    more than the dataclass holds.

    Args:
        target_class: The dataclass to construct from row data.
        aliases: Optional column-name to field-name mapping.
    """

    def __init__(
        self,
        target_class: type[T],
        aliases: dict[str, str] | None = None,
    ) -> None:
        if not dataclasses.is_dataclass(target_class):
            raise TypeError(f"{target_class.__name__} is not a dataclass")
        self._target_class = target_class
        self._aliases = aliases or {}
        self._fields = {f.name for f in dataclasses.fields(target_class)}

    def map_one(self, row: dict[str, Any]) -> T:
        data = {}
        for column, value in row.items():
            name = self._aliases.get(column, column)
            if name in self._fields:
                data[name] = value
        try:
            return self._target_class(**data)
        except TypeError as e:
            raise ColumnMismatchError(self._target_class.__name__, [str(e)]) from e

    def map_many(self, rows: list[dict[str, Any]]) -> list[T]:
        return [self.map_one(row) for row in rows]
