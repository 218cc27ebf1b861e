"""
Core defaults shared by the request encoder, response decoder, and schema builder.

Defines the selection sentinel, the default variable prefix, and the names of the
GraphQL built-in scalars. This module is zero-IO and uses only the Python standard
library.

Notes:
    - ``SELECT`` is the conventional leaf marker in a selection; any non-bool number
      is accepted by the encoder, ``1`` is simply the canonical spelling.
    - Variables are named ``<prefix><n>`` with ``n`` starting at 1.
    - ``BUILT_IN_SCALARS`` is always present in a schema document, even when a
      schema-definition text does not declare them.
"""

from __future__ import annotations

from typing import Final

__all__ = [
    "SELECT",
    "DEFAULT_VARIABLE_PREFIX",
    "FIRST_VARIABLE_INDEX",
    "BUILT_IN_SCALARS",
]

# Leaf marker for scalar and enum fields in a selection, e.g. {"name": SELECT}.
SELECT: Final[int] = 1

# Extracted argument values become $v1, $v2, ... unless configured otherwise.
DEFAULT_VARIABLE_PREFIX: Final[str] = "v"
FIRST_VARIABLE_INDEX: Final[int] = 1

BUILT_IN_SCALARS: Final[tuple[str, ...]] = ("Int", "String", "Float", "Boolean", "ID")
