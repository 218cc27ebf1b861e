"""
Operation grammar for encoded requests.

Defines the operation kinds a request document can start with and the helpers that
normalize loose caller input to them.

Design principles
-----------------
- Enum classes: PascalCase
- Enum member names: UPPER_SNAKE
- Enum serialized values (wire): lower case GraphQL keywords

Examples
--------
>>> from gqlfreeze.core.grammar import (
...     OperationKind,
...     is_graphql_name,
...     operation_kind_from_value,
... )
>>> operation_kind_from_value("Query") is OperationKind.QUERY
True
>>> is_graphql_name("v1")
True
"""

from __future__ import annotations

import re
from enum import Enum

from .errors import CodecError

__all__ = [
    "OperationKind",
    "operation_kind_from_value",
    "is_graphql_name",
]

_NAME_RE = re.compile(r"^[_A-Za-z][_0-9A-Za-z]*$")


class OperationKind(str, Enum):
    """GraphQL operation keyword that prefixes an encoded document."""

    QUERY = "query"
    MUTATION = "mutation"
    SUBSCRIPTION = "subscription"


def operation_kind_from_value(value: OperationKind | str) -> OperationKind:
    """
    Normalize an operation keyword to an OperationKind.

    Args:
        value (OperationKind | str): Enum member or keyword in any case.

    Returns:
        OperationKind: Matching enum member.

    Raises:
        CodecError: If value is not one of query, mutation, subscription.
    """
    if isinstance(value, OperationKind):
        return value
    try:
        return OperationKind(str(value).strip().lower())
    except ValueError as exc:
        raise CodecError(f"Unknown operation kind {value!r}") from exc


def is_graphql_name(value: str) -> bool:
    """Return True if value matches the GraphQL Name production."""
    return bool(_NAME_RE.match(value))
