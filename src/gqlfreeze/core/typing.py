"""
Lightweight typing aliases used across the codec, encoder, and decoder.

This module contains no runtime logic and is zero-IO.

Notes:
    - Selections are untyped at the value level; the aliases document intent only.
    - Runtime checks in the encoder and decoder are the source of truth.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

__all__ = [
    "JsonDict",
    "Selection",
    "DecodeFn",
    "EncodeFn",
]

# Convenient JSON-like mapping alias for wire values and variable bags.
JsonDict = dict[str, Any]

# {"field": SELECT, "nested": {...}, "call": (arguments, sub_selection)}
Selection = Mapping[str, Any]

DecodeFn = Callable[[Any], Any]
EncodeFn = Callable[[Any], Any]
