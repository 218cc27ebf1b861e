"""
gqlfreeze — typed request/response codec for GraphQL.

Selections (plain nested mappings) are encoded into query documents with extracted
variables; JSON responses are decoded back through per-field scalar transforms. Both
directions are driven by schema-derived codecs.

## Layout
- gqlfreeze.core — scalars, codec model, request encoder, response decoder, errors.
- gqlfreeze.schema — codecs built from introspection results or SDL text.
- gqlfreeze.config — CodecSettings (env > TOML > defaults).
- gqlfreeze.logging_config — structlog setup.
"""

from __future__ import annotations

from .config import CodecSettings
from .core import (
    SELECT,
    ArgumentCodec,
    CodecError,
    CodecField,
    EncodedRequest,
    OperationKind,
    Scalar,
    create_scalars,
    decode_object,
    decode_response,
    encode_request,
    scalar,
)
from .schema import SchemaCodec

__all__ = [
    "SELECT",
    "ArgumentCodec",
    "CodecError",
    "CodecField",
    "CodecSettings",
    "EncodedRequest",
    "OperationKind",
    "Scalar",
    "SchemaCodec",
    "create_scalars",
    "decode_object",
    "decode_response",
    "encode_request",
    "scalar",
]

__version__ = "0.1.0"
