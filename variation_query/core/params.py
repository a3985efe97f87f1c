"""SQL parameter handling.

Converts `:name` parameter syntax to driver-specific format and builds
the identifier predicates used for batched fetches.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from functools import lru_cache
from typing import Any

# Matches :name but not ::typecast and not inside words
_PARAM_PATTERN = re.compile(r"(?<![:\w]):([a-zA-Z_]\w*)")

# Matches single-quoted string literals (with escaped quotes handled)
_STRING_LITERAL_PATTERN = re.compile(r"'(?:[^'\\]|\\.)*'")


def normalize_params(sql: str, paramstyle: str) -> str:
    """Convert :name parameters to the target param style.

    Args:
        sql: SQL string with :name parameters.
        paramstyle: Target style - 'named' (no conversion) or 'pyformat' (%(name)s).

    Returns:
        SQL with parameters converted to the target style.
    """
    if paramstyle == "named":
        return sql
    return _convert_to_pyformat(sql)


@lru_cache(maxsize=256)
def _convert_to_pyformat(sql: str) -> str:
    """Convert :name params to %(name)s, preserving string literals."""
    parts: list[str] = []
    last_end = 0

    for match in _STRING_LITERAL_PATTERN.finditer(sql):
        start, end = match.span()
        if start > last_end:
            parts.append(_PARAM_PATTERN.sub(r"%(\1)s", sql[last_end:start]))
        parts.append(match.group())
        last_end = end

    if last_end < len(sql):
        parts.append(_PARAM_PATTERN.sub(r"%(\1)s", sql[last_end:]))

    return "".join(parts)


def build_id_predicate(param: str, ids: Sequence[int]) -> tuple[str, dict[str, Any]]:
    """Build the right-hand side of an identifier filter and its parameters.

    A single identifier binds as ``= :param``; several bind as
    ``IN (:param_0, :param_1, ...)``.

    Example:
        >>> build_id_predicate("variation_id", [4, 9])
        ('IN (:variation_id_0, :variation_id_1)', {'variation_id_0': 4, 'variation_id_1': 9})
    """
    if not ids:
        raise ValueError("cannot build a predicate over an empty identifier list")
    if len(ids) == 1:
        return f"= :{param}", {param: ids[0]}

    params = {f"{param}_{i}": value for i, value in enumerate(ids)}
    placeholders = ", ".join(f":{name}" for name in params)
    return f"IN ({placeholders})", params
