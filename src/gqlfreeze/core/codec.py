"""
Codec data model: per-type field descriptors that drive encoding and decoding.

A Codec maps field names of one GraphQL object type to CodecField descriptors. A
descriptor carries the field's decode function, an optional sub-codec supplier for
object-typed fields, and an optional argument map for fields called with arguments.

Sub-codecs are suppliers (zero-argument callables) rather than codecs so that
mutually recursive types can reference each other before both are built. The
supplier is only invoked when a selection actually nests into the field.

An Encoder is the input-side counterpart: input field name -> encode function.

Examples:
    >>> from gqlfreeze.core.codec import ArgumentCodec, CodecField
    >>> user = {"name": CodecField(decode=str)}
    >>> query = {
    ...     "getUser": CodecField(
    ...         decode=lambda v: v,
    ...         sub_codec=lambda: user,
    ...         args={"id": ArgumentCodec(type_name="Int", encode=int)},
    ...     )
    ... }
    >>> query["getUser"].resolve_sub_codec() is user
    True
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass

from .typing import DecodeFn, EncodeFn

__all__ = [
    "ArgumentCodec",
    "CodecField",
    "Codec",
    "CodecSupplier",
    "Encoder",
]


@dataclass(slots=True, frozen=True)
class ArgumentCodec:
    """
    Encoder for one field argument.

    Attributes:
        type_name (str): Wire type as declared in the schema, e.g. ``Int!`` or ``[ID!]``.
            Used verbatim in the operation's variable declarations.
        encode (EncodeFn): Domain -> wire conversion for the argument value.
    """

    type_name: str
    encode: EncodeFn


@dataclass(slots=True, frozen=True)
class CodecField:
    """
    Shape of one field within a Codec.

    Attributes:
        decode (DecodeFn): Wire -> domain conversion for the field's value, including
            any list/nullable wrapping.
        sub_codec (CodecSupplier | None): Supplier of the nested codec for object-typed
            fields; None for scalar and enum fields.
        args (Mapping[str, ArgumentCodec] | None): Argument encoders for fields that
            accept arguments; None otherwise.
    """

    decode: DecodeFn
    sub_codec: CodecSupplier | None = None
    args: Mapping[str, ArgumentCodec] | None = None

    def resolve_sub_codec(self) -> Codec | None:
        if self.sub_codec is None:
            return None
        return self.sub_codec()


Codec = Mapping[str, CodecField]
CodecSupplier = Callable[[], Codec]
Encoder = Mapping[str, EncodeFn]
