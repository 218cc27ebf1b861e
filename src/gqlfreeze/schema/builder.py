"""
SchemaCodec: runtime codecs for every type of a schema document.

Builds one Codec per output object type and one Encoder per input object type. Field
decoders and argument encoders are composed from the field's type tree:

| Type          | Decode                          | Encode                          |
|---------------|---------------------------------|---------------------------------|
| nullable      | decode_null(v, inner)           | encode_null(v, inner)           |
| list          | decode_list(v, inner)           | encode_list(v, inner)           |
| enum          | identity                        | Enum member -> its value        |
| scalar        | scalars[name].decode            | scalars[name].encode            |
| object        | decode_object(v, codec(name))   | encode_object(v, encoder(name)) |
| function      | decoder of its output type      | (not an input type)             |

Object references are resolved by name at call time, so mutually recursive types need
no construction order.

Examples:
```python
from gqlfreeze.schema import SchemaCodec

sc = SchemaCodec.from_sdl('''
    type Query { getUser(id: Int): User }
    type User { name: String email: String friends: [User!]! }
''')
sc.encode("query", {"getUser": ({"id": 42}, {"name": 1, "email": 1})}).query
# 'query($v1: Int) { getUser(id: $v1) { name email } }'
sc.decode("query", {"getUser": {"name": "Ada", "friends": []}})
# {'getUser': {'name': 'Ada', 'friends': []}}
```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import structlog

from gqlfreeze.config import CodecSettings
from gqlfreeze.core.codec import ArgumentCodec, Codec, CodecField, Encoder
from gqlfreeze.core.decoder import (
    GraphQLResponse,
    decode_list,
    decode_null,
    decode_object,
    decode_object_response,
    decode_response,
    encode_list,
    encode_null,
    encode_object,
)
from gqlfreeze.core.encoder import EncodedRequest, encode_request
from gqlfreeze.core.grammar import OperationKind, operation_kind_from_value
from gqlfreeze.core.scalars import Scalar, builtin_scalars, identity
from gqlfreeze.core.typing import DecodeFn, EncodeFn, JsonDict, Selection

from .document import document_from_introspection, document_from_sdl
from .errors import MissingScalar, SchemaError, UnknownType
from .types import (
    EnumType,
    FieldDef,
    FunctionType,
    GqlType,
    ListType,
    NullableType,
    ObjectType,
    ScalarType,
    SchemaDocument,
    named_type,
)

__all__ = [
    "SchemaCodec",
]

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


class SchemaCodec:
    """
    Codecs and encoders for one schema, plus per-operation entry points.

    Attributes:
        document (SchemaDocument): Source document.
        scalars (dict[str, Scalar]): Scalar registry used by every codec.
        settings (CodecSettings): Variable prefix and decoding strictness.

    Raises:
        MissingScalar: If the document uses scalars the registry does not define.
        UnknownType: If a field references an object or input type that is not defined.
    """

    def __init__(
        self,
        document: SchemaDocument,
        scalars: Mapping[str, Scalar] | None = None,
        settings: CodecSettings | None = None,
    ) -> None:
        self.document = document
        self.scalars = dict(scalars) if scalars is not None else builtin_scalars()
        self.settings = settings or CodecSettings()

        missing = tuple(name for name in document.scalars if name not in self.scalars)
        if missing:
            raise MissingScalar(missing)

        self._codecs: dict[str, dict[str, CodecField]] = {o.name: {} for o in document.outputs}
        self._encoders: dict[str, dict[str, EncodeFn]] = {o.name: {} for o in document.inputs}

        for obj in document.inputs:
            for field in obj.fields:
                self._encoders[obj.name][field.name] = self._encode_fn(field.type)
        for obj in document.outputs:
            for field in obj.fields:
                self._codecs[obj.name][field.name] = self._codec_field(field)

        logger.info(
            "schema codec built",
            objects=len(self._codecs),
            inputs=len(self._encoders),
            scalars=len(document.scalars),
        )

    @classmethod
    def from_sdl(
        cls,
        sdl: str,
        scalars: Mapping[str, Scalar] | None = None,
        settings: CodecSettings | None = None,
    ) -> SchemaCodec:
        return cls(document_from_sdl(sdl), scalars=scalars, settings=settings)

    @classmethod
    def from_introspection(
        cls,
        result: Mapping[str, Any],
        scalars: Mapping[str, Scalar] | None = None,
        settings: CodecSettings | None = None,
    ) -> SchemaCodec:
        return cls(document_from_introspection(result), scalars=scalars, settings=settings)

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def codec(self, name: str) -> Codec:
        try:
            return self._codecs[name]
        except KeyError as exc:
            raise UnknownType(name) from exc

    def encoder(self, name: str) -> Encoder:
        try:
            return self._encoders[name]
        except KeyError as exc:
            raise UnknownType(name) from exc

    def root_codec(self, operation: OperationKind | str) -> Codec:
        kind = operation_kind_from_value(operation)
        root = self.document.roots.get(kind)
        if root is None:
            raise SchemaError(f"Schema defines no {kind.value} root type")
        return self.codec(root)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def encode(self, operation: OperationKind | str, selection: Selection) -> EncodedRequest:
        """Encode a selection against the operation's root type."""
        return encode_request(
            operation,
            selection,
            self.root_codec(operation),
            variable_prefix=self.settings.variable_prefix,
        )

    def decode(self, operation: OperationKind | str, data: Any) -> JsonDict:
        """Decode the ``data`` member of a response to the operation."""
        return decode_object_response(data, self.root_codec(operation), strict=self.settings.strict_decode)

    def decode_response(self, operation: OperationKind | str, payload: Mapping[str, Any] | GraphQLResponse) -> JsonDict:
        """Decode a full response envelope, raising ResponseError if it reports errors."""
        return decode_response(payload, self.root_codec(operation), strict=self.settings.strict_decode)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def _codec_field(self, field: FieldDef) -> CodecField:
        target = named_type(field.type)
        sub_codec = None
        if isinstance(target, ObjectType):
            sub_codec = self._codec_supplier(target.name)

        args = None
        if isinstance(field.type, FunctionType):
            args = {
                arg.name: ArgumentCodec(type_name=arg.type_name, encode=self._encode_fn(arg.type))
                for arg in field.type.inputs
            }

        return CodecField(decode=self._decode_fn(field.type), sub_codec=sub_codec, args=args)

    def _codec_supplier(self, name: str):
        if name not in self._codecs:
            raise UnknownType(name)
        return lambda: self._codecs[name]

    def _decode_fn(self, gql_type: GqlType) -> DecodeFn:
        if isinstance(gql_type, NullableType):
            inner = self._decode_fn(gql_type.of_type)
            return lambda value: decode_null(value, inner)
        if isinstance(gql_type, ListType):
            element = self._decode_fn(gql_type.of_type)
            return lambda value: decode_list(value, element)
        if isinstance(gql_type, EnumType):
            return identity
        if isinstance(gql_type, ScalarType):
            return self.scalars[gql_type.name].decode
        if isinstance(gql_type, ObjectType):
            codec = self._codec_supplier(gql_type.name)
            strict = self.settings.strict_decode
            return lambda value: decode_object(value, codec(), strict=strict)
        if isinstance(gql_type, FunctionType):
            return self._decode_fn(gql_type.output)
        raise SchemaError(f"Cannot decode {gql_type!r}")

    def _encode_fn(self, gql_type: GqlType) -> EncodeFn:
        if isinstance(gql_type, NullableType):
            inner = self._encode_fn(gql_type.of_type)
            return lambda value: encode_null(value, inner)
        if isinstance(gql_type, ListType):
            element = self._encode_fn(gql_type.of_type)
            return lambda value: encode_list(value, element)
        if isinstance(gql_type, EnumType):
            return _encode_enum
        if isinstance(gql_type, ScalarType):
            return self.scalars[gql_type.name].encode
        if isinstance(gql_type, ObjectType):
            name = gql_type.name
            if name not in self._encoders:
                raise UnknownType(name)
            return lambda value: encode_object(value, self._encoders[name])
        raise SchemaError(f"Cannot encode {gql_type!r} as an input value")


def _encode_enum(value: Any) -> Any:
    # Python Enum members go on the wire by value; plain strings pass through.
    return getattr(value, "value", value)
