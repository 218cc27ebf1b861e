"""
Build a SchemaDocument from an introspection result or schema-definition text.

Both front-ends go through graphql-core: ``build_client_schema`` for introspection
results and ``build_schema`` for SDL. The resulting GraphQLSchema is then walked once
to collect object, input, enum and scalar types. No files or endpoints are read here;
callers pass in already-loaded values.

Notes:
    - Introspection types (``__Schema``, ``__Type``, ...) are ignored.
    - Interfaces and unions are not representable; fields typed with them are dropped
      and a warning is logged.
    - Built-in scalars are always listed, whether or not the schema references them.

Examples:
    >>> from gqlfreeze.schema.document import document_from_sdl
    >>> doc = document_from_sdl("type Query { hello(name: String!): String }")
    >>> [f.name for f in doc.output("Query").fields]
    ['hello']
    >>> doc.output("Query").fields[0].type.inputs[0].type_name
    'String!'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import structlog
from graphql import (
    GraphQLEnumType,
    GraphQLError,
    GraphQLInputObjectType,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    is_introspection_type,
)

from gqlfreeze.core.constants import BUILT_IN_SCALARS
from gqlfreeze.core.grammar import OperationKind

from .errors import SchemaError, UnsupportedType
from .types import (
    Argument,
    EnumDef,
    EnumType,
    FieldDef,
    FunctionType,
    GqlType,
    ListType,
    NullableType,
    ObjectDef,
    ObjectType,
    ScalarType,
    SchemaDocument,
)

__all__ = [
    "document_from_schema",
    "document_from_introspection",
    "document_from_sdl",
]

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


def _to_gql_type(graphql_type: Any, nullable: bool = True) -> GqlType:
    if isinstance(graphql_type, GraphQLNonNull):
        return _to_gql_type(graphql_type.of_type, nullable=False)

    inner: GqlType
    if isinstance(graphql_type, GraphQLList):
        inner = ListType(_to_gql_type(graphql_type.of_type))
    elif isinstance(graphql_type, GraphQLScalarType):
        inner = ScalarType(graphql_type.name)
    elif isinstance(graphql_type, GraphQLEnumType):
        inner = EnumType(graphql_type.name)
    elif isinstance(graphql_type, (GraphQLObjectType, GraphQLInputObjectType)):
        inner = ObjectType(graphql_type.name)
    else:
        raise UnsupportedType(str(graphql_type))

    return NullableType(inner) if nullable else inner


def _output_field(name: str, field: Any) -> FieldDef:
    output = _to_gql_type(field.type)
    if not field.args:
        return FieldDef(name=name, type=output)
    inputs = tuple(
        Argument(name=arg_name, type=_to_gql_type(arg.type), type_name=str(arg.type))
        for arg_name, arg in field.args.items()
    )
    return FieldDef(name=name, type=FunctionType(inputs=inputs, output=output))


def _output_object(definition: GraphQLObjectType) -> ObjectDef:
    fields = []
    for name, field in definition.fields.items():
        try:
            fields.append(_output_field(name, field))
        except UnsupportedType as exc:
            logger.warning("skipping field", type=definition.name, field=name, reason=str(exc))
    return ObjectDef(name=definition.name, fields=tuple(fields))


def _input_object(definition: GraphQLInputObjectType) -> ObjectDef:
    fields = tuple(
        FieldDef(name=name, type=_to_gql_type(field.type)) for name, field in definition.fields.items()
    )
    return ObjectDef(name=definition.name, fields=fields)


def document_from_schema(schema: GraphQLSchema) -> SchemaDocument:
    """
    Collect a SchemaDocument from a graphql-core schema.

    Args:
        schema (GraphQLSchema): Built schema.

    Returns:
        SchemaDocument: Types in the schema's type-map order.
    """
    inputs: list[ObjectDef] = []
    outputs: list[ObjectDef] = []
    enums: list[EnumDef] = []
    scalars: list[str] = list(BUILT_IN_SCALARS)

    for graphql_type in schema.type_map.values():
        if is_introspection_type(graphql_type):
            continue
        if isinstance(graphql_type, GraphQLObjectType):
            outputs.append(_output_object(graphql_type))
        elif isinstance(graphql_type, GraphQLInputObjectType):
            inputs.append(_input_object(graphql_type))
        elif isinstance(graphql_type, GraphQLEnumType):
            enums.append(EnumDef(name=graphql_type.name, values=tuple(graphql_type.values)))
        elif isinstance(graphql_type, GraphQLScalarType):
            if graphql_type.name not in scalars:
                scalars.append(graphql_type.name)

    roots: dict[OperationKind, str] = {}
    for kind, root in (
        (OperationKind.QUERY, schema.query_type),
        (OperationKind.MUTATION, schema.mutation_type),
        (OperationKind.SUBSCRIPTION, schema.subscription_type),
    ):
        if root is not None:
            roots[kind] = root.name

    return SchemaDocument(
        inputs=tuple(inputs),
        outputs=tuple(outputs),
        enums=tuple(enums),
        scalars=tuple(scalars),
        roots=roots,
    )


def document_from_introspection(result: Mapping[str, Any]) -> SchemaDocument:
    """
    Build a SchemaDocument from an introspection query result.

    Args:
        result (Mapping[str, Any]): Either ``{"__schema": ...}`` or a full response
            body ``{"data": {"__schema": ...}}``.

    Raises:
        SchemaError: If no ``__schema`` member is present or graphql-core rejects it.
    """
    data = result
    if "__schema" not in data:
        inner = data.get("data")
        if not isinstance(inner, Mapping) or "__schema" not in inner:
            raise SchemaError("Introspection result has no __schema member")
        data = inner
    try:
        schema = build_client_schema(dict(data))  # type: ignore[arg-type]
    except (GraphQLError, TypeError, ValueError) as exc:
        raise SchemaError(f"Invalid introspection result: {exc}") from exc
    return document_from_schema(schema)


def document_from_sdl(sdl: str) -> SchemaDocument:
    """
    Build a SchemaDocument from schema-definition text.

    Raises:
        SchemaError: If the text does not parse or describes an invalid schema.
    """
    try:
        schema = build_schema(sdl)
    except (GraphQLError, TypeError, ValueError) as exc:
        raise SchemaError(f"Invalid schema definition: {exc}") from exc
    return document_from_schema(schema)
