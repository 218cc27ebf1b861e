"""
Exceptions raised while turning a GraphQL schema into codecs.

Source of truth and boundaries
- gqlfreeze.core.errors covers encode/decode failures on a built codec.
- gqlfreeze.schema raises SchemaError subclasses while building one:
  - MissingScalar: schema uses a scalar with no entry in the scalar registry.
  - UnknownType: a named type (or operation root) is not defined by the document.
  - UnsupportedType: interfaces and unions have no codec representation.
"""

from __future__ import annotations

__all__ = [
    "SchemaError",
    "MissingScalar",
    "UnknownType",
    "UnsupportedType",
]


class SchemaError(ValueError):
    """Schema document cannot be turned into codecs."""


class MissingScalar(SchemaError):
    """
    Raised when the scalar registry lacks definitions the schema needs.

    Attributes:
        names (tuple[str, ...]): Scalar type names without a registry entry.
    """

    def __init__(self, names: tuple[str, ...]) -> None:
        super().__init__(f"No scalar definition for: {', '.join(names)}")
        self.names = names


class UnknownType(SchemaError):
    """Raised when a type name does not resolve to a defined object or input type."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown type {name}")
        self.name = name


class UnsupportedType(SchemaError):
    """Raised for interface and union types, which the codec cannot describe."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unsupported abstract type {name}")
        self.name = name
