"""
Request encoder: selection + codec -> query document and variable bag.

A selection is a nested mapping describing what to fetch. Each value's runtime shape
decides how the field is written:

| Selection value                 | Output                                  |
|---------------------------------|-----------------------------------------|
| number (``SELECT``)             | ``field``                               |
| ``(arguments, sub_selection)``  | ``field(arg: $v1, ...)`` [+ ``{ ... }``]|
| mapping                         | ``field { ... }``                       |

Shapes are tested in that order. Every non-null argument value is encoded with the
field's argument encoder and extracted into a variable; variables are numbered from 1
in depth-first, left-to-right order, so structurally identical selections always
produce identical documents.

Examples:
```python
from gqlfreeze.core.codec import ArgumentCodec, CodecField
from gqlfreeze.core.encoder import encode_request

user = {"name": CodecField(decode=str), "email": CodecField(decode=str)}
root = {
    "getUser": CodecField(
        decode=dict,
        sub_codec=lambda: user,
        args={"id": ArgumentCodec(type_name="Int", encode=int)},
    )
}
req = encode_request("query", {"getUser": ({"id": 42}, {"name": 1, "email": 1})}, root)
req.query
# 'query($v1: Int) { getUser(id: $v1) { name email } }'
req.variables
# {'v1': 42}
```
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict

from .codec import Codec, CodecField
from .constants import DEFAULT_VARIABLE_PREFIX, FIRST_VARIABLE_INDEX
from .errors import (
    CodecError,
    InvalidSelectionShape,
    MissingArgsCodec,
    MissingSubCodec,
    UnknownArgument,
    UnknownField,
)
from .grammar import OperationKind, is_graphql_name, operation_kind_from_value
from .typing import JsonDict, Selection

__all__ = [
    "Variable",
    "EncodedRequest",
    "GraphQLRequest",
    "encode_request",
    "is_select",
]

logger = structlog.wrap_logger(logging.getLogger(__name__), wrapper_class=structlog.stdlib.BoundLogger)


def is_select(value: Any) -> bool:
    """True for the scalar/enum leaf marker: any number that is not a bool."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_call(value: Any) -> bool:
    return isinstance(value, (list, tuple))


@dataclass(slots=True, frozen=True)
class Variable:
    """
    One extracted argument value.

    Attributes:
        name (str): Generated variable name without the ``$``.
        type_name (str): Declared wire type, e.g. ``Int!``.
        value (Any): Already-encoded wire value.
    """

    name: str
    type_name: str
    value: Any


class EncodedRequest(BaseModel):
    """
    Output of encoding: document text plus variable bag.

    Attributes:
        query (str): Complete operation document.
        variables (dict[str, Any] | None): Variable name -> wire value; None when the
            selection supplied no arguments.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    query: str
    variables: dict[str, Any] | None = None

    def to_payload(self) -> JsonDict:
        """JSON body for an HTTP or socket transport; ``variables`` omitted when absent."""
        return self.model_dump(exclude_none=True)


class GraphQLRequest:
    """
    Per-call encoding state.

    Holds the ordered variables extracted so far and the counter for fresh names. One
    instance serves exactly one encode call; concurrent encodes must use separate
    instances.
    """

    def __init__(self, variable_prefix: str = DEFAULT_VARIABLE_PREFIX) -> None:
        self.variables: list[Variable] = []
        self._prefix = variable_prefix
        self._counter = FIRST_VARIABLE_INDEX

    def variables_supply_list(self) -> str:
        """Variable declarations, ``($v1: Int, $v2: String!)``, or ``""`` if none."""
        if not self.variables:
            return ""
        segments = ", ".join(f"${v.name}: {v.type_name}" for v in self.variables)
        return f"({segments})"

    def variables_json_object(self) -> dict[str, Any] | None:
        if not self.variables:
            return None
        return {v.name: v.value for v in self.variables}

    def encode_object(self, selection: Any, codec: Codec) -> str:
        """
        Encode one selection level as ``{ field field ... }``.

        Raises:
            InvalidSelectionShape: If selection is not a mapping.
            UnknownField: If a selected field has no descriptor in codec.
        """
        if not isinstance(selection, Mapping):
            raise InvalidSelectionShape("<root>", selection)

        fragments = []
        for field_name, field_value in selection.items():
            field = codec.get(field_name)
            if field is None:
                raise UnknownField(field_name)
            fragments.append(self.encode_field(field_name, field_value, field))
        return "{ " + " ".join(fragments) + " }"

    def encode_field(self, name: str, value: Any, field: CodecField) -> str:
        if is_select(value):
            return name
        if _is_call(value):
            if len(value) != 2:
                raise InvalidSelectionShape(name, value)
            return self.encode_function(name, value[0], value[1], field)
        if isinstance(value, Mapping):
            return f"{name} {self._encode_nested(name, value, field)}"
        raise InvalidSelectionShape(name, value)

    def encode_function(self, name: str, arguments: Any, sub_selection: Any, field: CodecField) -> str:
        """
        Encode a field invoked with arguments.

        Raises:
            MissingArgsCodec: If the field declares no arguments.
            UnknownArgument: If a non-null argument has no encoder.
            InvalidSelectionShape: If arguments is not a mapping, or sub_selection is
                neither a sentinel nor a mapping.
        """
        if field.args is None:
            raise MissingArgsCodec(name)
        if not isinstance(arguments, Mapping):
            raise InvalidSelectionShape(name, arguments)

        inputs = []
        for arg_name, arg_value in arguments.items():
            if arg_value is None:
                continue
            arg = field.args.get(arg_name)
            if arg is None:
                raise UnknownArgument(name, arg_name)
            variable = self._new_variable(arg.type_name, arg.encode(arg_value))
            inputs.append(f"{arg_name}: ${variable.name}")

        call = f"{name}({', '.join(inputs)})" if inputs else name
        if is_select(sub_selection):
            return call
        if isinstance(sub_selection, Mapping):
            return f"{call} {self._encode_nested(name, sub_selection, field)}"
        raise InvalidSelectionShape(name, sub_selection)

    def _encode_nested(self, name: str, selection: Selection, field: CodecField) -> str:
        sub_codec = field.resolve_sub_codec()
        if sub_codec is None:
            raise MissingSubCodec(name)
        return self.encode_object(selection, sub_codec)

    def _new_variable(self, type_name: str, value: Any) -> Variable:
        variable = Variable(name=f"{self._prefix}{self._counter}", type_name=type_name, value=value)
        self._counter += 1
        self.variables.append(variable)
        return variable


def encode_request(
    operation: OperationKind | str,
    selection: Selection,
    codec: Codec,
    variable_prefix: str = DEFAULT_VARIABLE_PREFIX,
) -> EncodedRequest:
    """
    Encode a selection against a root codec.

    Args:
        operation (OperationKind | str): ``query``, ``mutation`` or ``subscription``.
        selection (Selection): Fields (and arguments) to request.
        codec (Codec): Codec of the operation's root type.
        variable_prefix (str): Prefix for generated variable names.

    Returns:
        EncodedRequest: ``"<operation><declarations> { ... }"`` plus variables.

    Raises:
        CodecError: Any subclass listed in gqlfreeze.core.errors on mismatch, or if
            variable_prefix is not a valid GraphQL name.
    """
    kind = operation_kind_from_value(operation)
    if not is_graphql_name(variable_prefix):
        raise CodecError(f"Invalid variable prefix {variable_prefix!r}")
    request = GraphQLRequest(variable_prefix)
    body = request.encode_object(selection, codec)
    query = f"{kind.value}{request.variables_supply_list()} {body}"
    logger.debug("encoded request", operation=kind.value, variables=len(request.variables))
    return EncodedRequest(query=query, variables=request.variables_json_object())
