"""
Scalar registry: wire/domain conversion pairs for GraphQL scalar types.

A Scalar bundles ``encode`` (domain -> wire) and ``decode`` (wire -> domain). Scalars are
built once at client setup and shared, read-only, by every codec derived from a schema.
Nothing is validated at construction time; the pair is returned unchanged.

Examples:
    >>> from datetime import date
    >>> from gqlfreeze.core.scalars import scalar, create_scalars
    >>> Date = scalar(encode=lambda d: d.isoformat(), decode=date.fromisoformat)
    >>> scalars = create_scalars(Date=Date)
    >>> scalars["Date"].decode("2024-02-29")
    datetime.date(2024, 2, 29)
    >>> scalars["Int"].encode(3)
    3
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import BUILT_IN_SCALARS
from .typing import DecodeFn, EncodeFn

__all__ = [
    "Scalar",
    "Scalars",
    "scalar",
    "identity",
    "builtin_scalars",
    "create_scalars",
]


@dataclass(slots=True, frozen=True)
class Scalar:
    """
    One scalar's wire <-> domain mapping.

    Attributes:
        encode (EncodeFn): Converts a domain value to its wire form.
        decode (DecodeFn): Converts a wire value to its domain form.
    """

    encode: EncodeFn
    decode: DecodeFn


Scalars = Mapping[str, Scalar]


def identity(value: Any) -> Any:
    return value


def scalar(encode: EncodeFn = identity, decode: DecodeFn = identity) -> Scalar:
    """
    Build a Scalar from an encode/decode pair.

    Args:
        encode (EncodeFn): Domain -> wire conversion. Defaults to identity.
        decode (DecodeFn): Wire -> domain conversion. Defaults to identity.

    Returns:
        Scalar: The pair, unchanged.
    """
    return Scalar(encode=encode, decode=decode)


def builtin_scalars() -> dict[str, Scalar]:
    """Identity scalars for Int, String, Float, Boolean and ID."""
    return {name: scalar() for name in BUILT_IN_SCALARS}


def create_scalars(custom: Mapping[str, Scalar] | None = None, **named: Scalar) -> dict[str, Scalar]:
    """
    Build a registry from the built-in scalars plus custom definitions.

    Custom entries (mapping first, then keywords) override built-ins of the same name.

    Args:
        custom (Mapping[str, Scalar] | None): Scalars keyed by GraphQL type name.
        **named (Scalar): Additional scalars keyed by GraphQL type name.

    Returns:
        dict[str, Scalar]: New registry; the inputs are not modified.
    """
    registry = builtin_scalars()
    if custom:
        registry.update(custom)
    registry.update(named)
    return registry
