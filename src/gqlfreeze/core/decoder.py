"""
Response decoder and the symmetric input encode helpers.

Decoding walks a wire response against a Codec. Only keys present in the response are
visited; each must have a descriptor in the codec (``MissingDecoder`` otherwise, unless
decoding is lenient). Lists and nullable values compose by nesting the helpers, which
is how schema-built codecs express ``[User!]`` or ``String``.

The encode helpers mirror the decode side for nested input argument values.

Notes:
    - Recursion is bounded by the response value, never by the (possibly cyclic) codec.
    - No partial results: the first mismatch aborts the whole call.
    - Pure, synchronous, zero-IO apart from debug logging.

Examples:
    >>> from gqlfreeze.core.codec import CodecField
    >>> from gqlfreeze.core.decoder import decode_list, decode_null, decode_object
    >>> codec = {"tags": CodecField(decode=lambda v: decode_null(v, lambda x: decode_list(x, str)))}
    >>> decode_object({"tags": ["a", "b"]}, codec)
    {'tags': ['a', 'b']}
    >>> decode_object({"tags": None}, codec)
    {'tags': None}
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from .codec import Codec, Encoder
from .errors import ExpectedArray, ExpectedObject, MissingDecoder, MissingEncoder, ResponseError
from .typing import DecodeFn, EncodeFn, JsonDict

__all__ = [
    "GraphQLResponse",
    "decode_object",
    "decode_object_response",
    "decode_list",
    "decode_null",
    "decode_response",
    "encode_object",
    "encode_list",
    "encode_null",
]

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


def _is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


# ============================================================================
# Decode
# ============================================================================


def decode_object(value: Any, codec: Codec, strict: bool = True) -> dict[str, Any]:
    """
    Decode a wire object field by field.

    Args:
        value (Any): Wire value; must be a mapping.
        codec (Codec): Descriptors for the object's type.
        strict (bool): If False, keys without a descriptor are skipped instead of raising.

    Returns:
        dict[str, Any]: Decoded values keyed by the response's own field names, in
        response order.

    Raises:
        ExpectedObject: If value is not a mapping.
        MissingDecoder: If strict and a response key has no descriptor.
    """
    if not isinstance(value, Mapping):
        raise ExpectedObject(value)

    decoded: dict[str, Any] = {}
    for field_name, field_value in value.items():
        field = codec.get(field_name)
        if field is None:
            if strict:
                raise MissingDecoder(field_name)
            logger.debug("skipping field without decoder", field=field_name)
            continue
        decoded[field_name] = field.decode(field_value)
    return decoded


def decode_object_response(value: Any, codec: Codec, strict: bool = True) -> dict[str, Any]:
    """Decode the ``data`` member of a response against a root codec."""
    return decode_object(value, codec, strict=strict)


def decode_list(value: Any, decode: DecodeFn) -> list[Any]:
    """
    Decode every element of a wire array, preserving order and length.

    Raises:
        ExpectedArray: If value is not a list or tuple.
    """
    if not _is_array(value):
        raise ExpectedArray(value)
    return [decode(item) for item in value]


def decode_null(value: Any, decode: DecodeFn) -> Any:
    """Pass None through; decode anything else."""
    if value is None:
        return None
    return decode(value)


# ============================================================================
# Response envelope
# ============================================================================


class GraphQLResponse(BaseModel):
    """
    Wire response envelope.

    Attributes:
        data (Any): Result object for the operation's root type, or None.
        errors (list[dict[str, Any]] | None): Error entries, if the server reported any.
        extensions (dict[str, Any] | None): Server-specific metadata; not decoded.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    data: Any = None
    errors: list[dict[str, Any]] | None = None
    extensions: dict[str, Any] | None = Field(default=None)


def decode_response(payload: Mapping[str, Any] | GraphQLResponse, codec: Codec, strict: bool = True) -> JsonDict:
    """
    Decode a full response envelope.

    Args:
        payload (Mapping[str, Any] | GraphQLResponse): Parsed response body.
        codec (Codec): Root codec of the operation that produced the response.
        strict (bool): Forwarded to decode_object.

    Returns:
        JsonDict: Decoded ``data``.

    Raises:
        ResponseError: If the envelope carries a non-empty ``errors`` list.
        ExpectedObject: If ``data`` is missing or not an object.
        pydantic.ValidationError: If the envelope itself is malformed.
    """
    response = payload if isinstance(payload, GraphQLResponse) else GraphQLResponse.model_validate(payload)
    if response.errors:
        raise ResponseError(response.errors, data=response.data)
    return decode_object_response(response.data, codec, strict=strict)


# ============================================================================
# Encode (input values)
# ============================================================================


def encode_object(value: Any, encoder: Encoder) -> dict[str, Any]:
    """
    Encode an input object field by field.

    Raises:
        ExpectedObject: If value is not a mapping.
        MissingEncoder: If a key has no input encoder.
    """
    if not isinstance(value, Mapping):
        raise ExpectedObject(value)

    encoded: dict[str, Any] = {}
    for field_name, field_value in value.items():
        encode_field = encoder.get(field_name)
        if encode_field is None:
            raise MissingEncoder(field_name)
        encoded[field_name] = encode_field(field_value)
    return encoded


def encode_list(value: Any, encode: EncodeFn) -> list[Any]:
    if not _is_array(value):
        raise ExpectedArray(value)
    return [encode(item) for item in value]


def encode_null(value: Any, encode: EncodeFn) -> Any:
    if value is None:
        return None
    return encode(value)
