"""
gqlfreeze.schema — build runtime codecs from a GraphQL schema.

## Responsibilities
- Turn an introspection result or schema-definition text into a SchemaDocument
  (via graphql-core), in memory.
- Build a Codec per output object type and an Encoder per input object type.
- Offer per-operation encode/decode entry points on top of gqlfreeze.core.

## Public API
- SchemaCodec — codecs for one schema plus encode/decode by operation kind.
- SchemaDocument — language-neutral schema view the codecs are built from.
- document_from_introspection / document_from_sdl — front-ends.

## Import DAG discipline
- Depends on stdlib, graphql-core, structlog, gqlfreeze.core and gqlfreeze.config.
- gqlfreeze.core never imports this package.
"""

from __future__ import annotations

from .builder import SchemaCodec
from .document import document_from_introspection, document_from_schema, document_from_sdl
from .errors import MissingScalar, SchemaError, UnknownType, UnsupportedType
from .types import SchemaDocument

__all__ = [
    "SchemaCodec",
    "SchemaDocument",
    "document_from_introspection",
    "document_from_schema",
    "document_from_sdl",
    "SchemaError",
    "MissingScalar",
    "UnknownType",
    "UnsupportedType",
]
