"""Repository base class and argument checks shared by the adaptors."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from variation_query.core.exceptions import InvalidArgumentError
from variation_query.mapping.protocol import Mapper

T = TypeVar("T")


def require_dbid(value: Any, argument: str = "dbid") -> int:
    """Return ``value`` if it is an integer identifier, else raise."""
    if value is None:
        raise InvalidArgumentError(argument, "identifier argument expected")
    # bool is an int subclass but never a database identifier
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(argument, f"expected an integer, got {type(value).__name__}")
    return value


def require_name(value: Any, argument: str = "name") -> str:
    """Return ``value`` if it is a string, else raise."""
    if value is None:
        raise InvalidArgumentError(argument, "name argument expected")
    if not isinstance(value, str):
        raise InvalidArgumentError(argument, f"expected a string, got {type(value).__name__}")
    return value


class Repository(Generic[T]):
    """Base repository: an engine plus the mapper for its entity.

    Subclasses define concrete fetch methods that delegate to the engine.
    """

    def __init__(self, engine: Any, mapper: Mapper[T] | None = None) -> None:
        self.engine = engine
        self.mapper = mapper
