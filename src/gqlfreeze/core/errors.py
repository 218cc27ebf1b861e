"""
Core exception types raised by the request encoder and the response decoder.

Every failure is immediate and local: an encode or decode call aborts on the first
mismatch and returns no partial result. The offending field or argument name is kept
on the exception so callers can report it.

Taxonomy:
- UnknownField: selection names a field the codec does not have.
- MissingSubCodec / MissingArgsCodec: codec is inconsistent with the selection's shape.
- UnknownArgument: selection supplies an argument the field's args map lacks.
- InvalidSelectionShape: selection value is neither sentinel, pair, nor mapping.
- ExpectedObject / ExpectedArray: wire value has the wrong runtime shape.
- MissingDecoder / MissingEncoder: response or input carries a key the codec lacks.
- ResponseError: response envelope reported GraphQL errors.

Examples:
    >>> from gqlfreeze.core.errors import UnknownField, CodecError
    >>> try:
    ...     raise UnknownField("unknownField")
    ... except CodecError as e:
    ...     e.field
    'unknownField'
"""

from __future__ import annotations

from typing import Any

__all__ = [
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


def _short(value: Any, limit: int = 60) -> str:
    text = repr(value)
    if len(text) > limit:
        return text[: limit - 3] + "..."
    return text


class CodecError(ValueError):
    """Base class for encode/decode failures."""


class UnknownField(CodecError):
    """Selection references a field absent from the codec."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Codec has no field {field!r}")
        self.field = field


class MissingSubCodec(CodecError):
    """Selection nests into a field whose descriptor has no sub-codec."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field {field!r} has a nested selection but no sub-codec")
        self.field = field


class MissingArgsCodec(CodecError):
    """Selection passes arguments to a field whose descriptor has no args map."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Field {field!r} was given arguments but accepts none")
        self.field = field


class UnknownArgument(CodecError):
    """Selection supplies an argument the field does not declare."""

    def __init__(self, field: str, argument: str) -> None:
        super().__init__(f"Field {field!r} has no argument {argument!r}")
        self.field = field
        self.argument = argument


class InvalidSelectionShape(CodecError):
    """Selection value is not a sentinel, an (arguments, selection) pair, or a mapping."""

    def __init__(self, field: str, value: Any) -> None:
        super().__init__(
            f"Expected number, (arguments, selection) pair or mapping for field {field!r}, "
            f"but instead got {_short(value)}"
        )
        self.field = field
        self.value = value


class ExpectedObject(CodecError):
    """Wire value should have been a JSON object."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Expected object, but instead got {_short(value)}")
        self.value = value


class ExpectedArray(CodecError):
    """Wire value should have been a JSON array."""

    def __init__(self, value: Any) -> None:
        super().__init__(f"Expected array, but instead got {_short(value)}")
        self.value = value


class MissingDecoder(CodecError):
    """Response object carries a key the codec cannot decode."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing decoder for {field!r}")
        self.field = field


class MissingEncoder(CodecError):
    """Input object carries a key the input encoder does not know."""

    def __init__(self, field: str) -> None:
        super().__init__(f"No input encoder found for {field!r}")
        self.field = field


class ResponseError(RuntimeError):
    """
    Response envelope contained GraphQL errors.

    Attributes:
        errors (list[dict[str, Any]]): Error entries as sent by the server.
        data (Any): Partial ``data`` member, left undecoded.
    """

    def __init__(self, errors: list[dict[str, Any]], data: Any = None) -> None:
        messages = "; ".join(str(e.get("message", e)) for e in errors)
        super().__init__(f"Response contained {len(errors)} error(s): {messages}")
        self.errors = errors
        self.data = data
