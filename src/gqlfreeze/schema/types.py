"""
In-memory schema document model.

A SchemaDocument is the language-neutral view of a GraphQL schema that codecs are
built from: output objects, input objects, enums, scalars, and operation roots. Field
types form a small tree:

| GraphQL          | Model                                         |
|------------------|-----------------------------------------------|
| ``String``       | ``NullableType(ScalarType("String"))``        |
| ``String!``      | ``ScalarType("String")``                      |
| ``[User!]``      | ``NullableType(ListType(ObjectType("User")))``|
| ``f(id: ID!): T``| ``FunctionType((Argument(...),), T)``         |

Nullability is explicit: a named type is wrapped in NullableType unless the schema
marks it non-null.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from gqlfreeze.core.grammar import OperationKind

__all__ = [
    "ScalarType",
    "EnumType",
    "ObjectType",
    "ListType",
    "NullableType",
    "FunctionType",
    "GqlType",
    "Argument",
    "FieldDef",
    "ObjectDef",
    "EnumDef",
    "SchemaDocument",
    "named_type",
]


@dataclass(slots=True, frozen=True)
class ScalarType:
    name: str


@dataclass(slots=True, frozen=True)
class EnumType:
    name: str


@dataclass(slots=True, frozen=True)
class ObjectType:
    """Output object or input object, depending on where it is used."""

    name: str


@dataclass(slots=True, frozen=True)
class ListType:
    of_type: GqlType


@dataclass(slots=True, frozen=True)
class NullableType:
    of_type: GqlType


@dataclass(slots=True, frozen=True)
class FunctionType:
    """Field that takes arguments; ``output`` is the field's result type."""

    inputs: tuple[Argument, ...]
    output: GqlType


GqlType = Union[ScalarType, EnumType, ObjectType, ListType, NullableType, FunctionType]


@dataclass(slots=True, frozen=True)
class Argument:
    """
    Field argument.

    Attributes:
        name (str): Argument name.
        type (GqlType): Argument type, used to build its encoder.
        type_name (str): Type as written in the schema (``Int!``, ``[ID!]``), used in
            variable declarations.
    """

    name: str
    type: GqlType
    type_name: str


@dataclass(slots=True, frozen=True)
class FieldDef:
    name: str
    type: GqlType


@dataclass(slots=True, frozen=True)
class ObjectDef:
    name: str
    fields: tuple[FieldDef, ...]


@dataclass(slots=True, frozen=True)
class EnumDef:
    name: str
    values: tuple[str, ...]


@dataclass(slots=True, frozen=True)
class SchemaDocument:
    """
    Everything needed to build codecs for one schema.

    Attributes:
        inputs (tuple[ObjectDef, ...]): Input object types.
        outputs (tuple[ObjectDef, ...]): Output object types (including roots).
        enums (tuple[EnumDef, ...]): Enum types.
        scalars (tuple[str, ...]): Scalar type names, built-ins included.
        roots (dict[OperationKind, str]): Root object type per supported operation.
    """

    inputs: tuple[ObjectDef, ...] = ()
    outputs: tuple[ObjectDef, ...] = ()
    enums: tuple[EnumDef, ...] = ()
    scalars: tuple[str, ...] = ()
    roots: dict[OperationKind, str] = field(default_factory=dict)

    def output(self, name: str) -> ObjectDef | None:
        return next((o for o in self.outputs if o.name == name), None)

    def input(self, name: str) -> ObjectDef | None:
        return next((o for o in self.inputs if o.name == name), None)


def named_type(gql_type: GqlType) -> ScalarType | EnumType | ObjectType:
    """Strip list, nullable and function wrappers down to the named type."""
    if isinstance(gql_type, (ListType, NullableType)):
        return named_type(gql_type.of_type)
    if isinstance(gql_type, FunctionType):
        return named_type(gql_type.output)
    return gql_type
