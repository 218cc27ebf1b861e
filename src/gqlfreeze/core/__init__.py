"""
Core package aggregator for the codec engine (scalars, codecs, encoder, decoder).

## Contracts
- Scalars — encode/decode pairs per GraphQL scalar, shared by all codecs.
- Codec — field name -> CodecField (decode, lazy sub-codec, argument encoders).
- Encoder — selection + codec -> EncodedRequest (query text + variables).
- Decoder — wire response + codec -> decoded mapping; symmetric input encode helpers.
- Errors — fail-fast taxonomy; every failure names the offending field or key.

## Notes
- Zero-IO policy: nothing here reads files or talks to the network.
- Encode and decode are synchronous tree walks; each encode call owns its own state.
- Selection shapes are checked in order: number, (arguments, selection) pair, mapping.

## Examples
```python
from gqlfreeze.core import SELECT, ArgumentCodec, CodecField, encode_request, decode_object

user = {"name": CodecField(decode=str)}
root = {"user": CodecField(decode=lambda v: decode_object(v, user), sub_codec=lambda: user,
                           args={"id": ArgumentCodec("ID!", str)})}
encode_request("query", {"user": ({"id": 7}, {"name": SELECT})}, root).query
# 'query($v1: ID!) { user(id: $v1) { name } }'
```
"""

from __future__ import annotations

from .codec import ArgumentCodec, Codec, CodecField, Encoder
from .constants import BUILT_IN_SCALARS, SELECT
from .decoder import (
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
from .encoder import EncodedRequest, GraphQLRequest, Variable, encode_request
from .errors import (
    CodecError,
    ExpectedArray,
    ExpectedObject,
    InvalidSelectionShape,
    MissingArgsCodec,
    MissingDecoder,
    MissingEncoder,
    MissingSubCodec,
    ResponseError,
    UnknownArgument,
    UnknownField,
)
from .grammar import OperationKind
from .scalars import Scalar, Scalars, builtin_scalars, create_scalars, scalar

__all__ = [
    "SELECT",
    "BUILT_IN_SCALARS",
    "OperationKind",
    # scalars
    "Scalar",
    "Scalars",
    "scalar",
    "builtin_scalars",
    "create_scalars",
    # codec
    "ArgumentCodec",
    "CodecField",
    "Codec",
    "Encoder",
    # encoder
    "Variable",
    "EncodedRequest",
    "GraphQLRequest",
    "encode_request",
    # decoder
    "GraphQLResponse",
    "decode_object",
    "decode_object_response",
    "decode_list",
    "decode_null",
    "decode_response",
    "encode_object",
    "encode_list",
    "encode_null",
    # errors
    "CodecError",
    "UnknownField",
    "MissingSubCodec",
    "MissingArgsCodec",
    "UnknownArgument",
    "InvalidSelectionShape",
    "ExpectedObject",
    "ExpectedArray",
    "MissingDecoder",
    "MissingEncoder",
    "ResponseError",
]
