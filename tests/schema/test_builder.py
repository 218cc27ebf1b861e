from datetime import date
from enum import Enum

import pytest

from gqlfreeze.config import CodecSettings
from gqlfreeze.core.constants import SELECT
from gqlfreeze.core.errors import (
    ExpectedObject,
    MissingDecoder,
    MissingEncoder,
    ResponseError,
    UnknownArgument,
    UnknownField,
)
from gqlfreeze.core.scalars import create_scalars, scalar
from gqlfreeze.schema import SchemaCodec, document_from_sdl
from gqlfreeze.schema.errors import MissingScalar, SchemaError, UnknownType
from gqlfreeze.schema.types import FieldDef, ObjectDef, ObjectType, SchemaDocument

SDL = """
scalar Date

enum Role { ADMIN MEMBER }

input UserFilter { role: Role, joinedAfter: Date, tags: [String!] }

type User {
  id: ID!
  name: String
  email: String
  role: Role!
  joined: Date
  friends(first: Int, filter: UserFilter): [User!]!
  team: Team
}

type Team { title: String! members: [User!] }

type Query {
  getUser(id: Int): User
  users(ids: [ID!]!): [User]
  today: Date!
}

type Mutation { rename(id: ID!, name: String!): User! }
"""

DATE = scalar(encode=lambda d: d.isoformat(), decode=date.fromisoformat)


class Role(Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


@pytest.fixture()
def codec() -> SchemaCodec:
    return SchemaCodec.from_sdl(SDL, scalars=create_scalars(Date=DATE))


def test_nested_argument_scenario(codec: SchemaCodec) -> None:
    req = codec.encode("query", {"getUser": [{"id": 42}, {"name": 1, "email": 1}]})

    assert req.query == "query($v1: Int) { getUser(id: $v1) { name email } }"
    assert req.variables == {"v1": 42}


def test_argument_wire_types_come_from_schema(codec: SchemaCodec) -> None:
    req = codec.encode(
        "query",
        {
            "users": ({"ids": ["1", "2"]}, {"friends": ({"first": 2}, {"id": SELECT})}),
        },
    )

    assert req.query == (
        "query($v1: [ID!]!, $v2: Int) { users(ids: $v1) { friends(first: $v2) { id } } }"
    )
    assert req.variables == {"v1": ["1", "2"], "v2": 2}


def test_input_object_arguments_are_encoded(codec: SchemaCodec) -> None:
    req = codec.encode(
        "query",
        {
            "getUser": (
                {"id": 1},
                {
                    "friends": (
                        {"filter": {"role": Role.ADMIN, "joinedAfter": date(2020, 5, 1), "tags": None}},
                        {"name": SELECT},
                    )
                },
            )
        },
    )

    assert "$v2: UserFilter" in req.query
    assert req.variables["v2"] == {"role": "ADMIN", "joinedAfter": "2020-05-01", "tags": None}


def test_unknown_input_field_raises(codec: SchemaCodec) -> None:
    with pytest.raises(MissingEncoder, match="colour"):
        codec.encode(
            "query",
            {"getUser": ({}, {"friends": ({"filter": {"colour": "red"}}, {"name": SELECT})})},
        )


def test_mutation_root(codec: SchemaCodec) -> None:
    req = codec.encode("mutation", {"rename": ({"id": "7", "name": "Bob"}, {"name": SELECT})})

    assert req.query == "mutation($v1: ID!, $v2: String!) { rename(id: $v1, name: $v2) { name } }"
    assert req.to_payload() == {"query": req.query, "variables": {"v1": "7", "v2": "Bob"}}


def test_missing_root_raises(codec: SchemaCodec) -> None:
    with pytest.raises(SchemaError, match="subscription"):
        codec.encode("subscription", {"today": SELECT})


def test_encode_errors_surface(codec: SchemaCodec) -> None:
    with pytest.raises(UnknownField):
        codec.encode("query", {"unknownField": 1})
    with pytest.raises(UnknownArgument):
        codec.encode("query", {"getUser": ({"login": "x"}, {"name": SELECT})})


def test_decode_applies_scalars_and_recursion(codec: SchemaCodec) -> None:
    data = {
        "today": "2024-02-29",
        "getUser": {
            "name": "Ada",
            "joined": "2020-01-01",
            "friends": [{"name": "Bob", "team": {"title": "core", "members": None}}],
            "team": None,
        },
    }

    assert codec.decode("query", data) == {
        "today": date(2024, 2, 29),
        "getUser": {
            "name": "Ada",
            "joined": date(2020, 1, 1),
            "friends": [{"name": "Bob", "team": {"title": "core", "members": None}}],
            "team": None,
        },
    }


def test_decode_nullable_list_of_objects(codec: SchemaCodec) -> None:
    assert codec.decode("query", {"users": None}) == {"users": None}
    assert codec.decode("query", {"users": []}) == {"users": []}
    assert codec.decode("query", {"users": [{"id": "1"}, None]}) == {"users": [{"id": "1"}, None]}


def test_decode_errors(codec: SchemaCodec) -> None:
    with pytest.raises(MissingDecoder, match="extraField"):
        codec.decode("query", {"getUser": {"name": "Ada", "extraField": 1}})
    with pytest.raises(ExpectedObject):
        codec.decode("query", "not an object")


def test_lenient_settings_skip_unknown_keys() -> None:
    lenient = SchemaCodec.from_sdl(
        SDL,
        scalars=create_scalars(Date=DATE),
        settings=CodecSettings(strict_decode=False),
    )

    assert lenient.decode("query", {"getUser": {"name": "Ada", "extraField": 1}}) == {
        "getUser": {"name": "Ada"}
    }


def test_variable_prefix_from_settings() -> None:
    sc = SchemaCodec.from_sdl(SDL, scalars=create_scalars(Date=DATE), settings=CodecSettings(variable_prefix="p"))
    assert sc.encode("query", {"getUser": ({"id": 1}, {"name": SELECT})}).variables == {"p1": 1}


def test_decode_response_envelope(codec: SchemaCodec) -> None:
    assert codec.decode_response("query", {"data": {"today": "2024-01-01"}}) == {"today": date(2024, 1, 1)}
    with pytest.raises(ResponseError):
        codec.decode_response("query", {"data": None, "errors": [{"message": "denied"}]})


def test_missing_scalar_definition() -> None:
    with pytest.raises(MissingScalar) as info:
        SchemaCodec.from_sdl(SDL)
    assert info.value.names == ("Date",)


def test_lookup_unknown_type(codec: SchemaCodec) -> None:
    assert "name" in codec.codec("User")
    assert "role" in codec.encoder("UserFilter")
    with pytest.raises(UnknownType):
        codec.codec("Nope")
    with pytest.raises(UnknownType):
        codec.encoder("User")


def test_undefined_object_reference_fails_at_build() -> None:
    document = SchemaDocument(
        outputs=(ObjectDef(name="Query", fields=(FieldDef(name="ghost", type=ObjectType("Ghost")),)),),
        scalars=(),
    )
    with pytest.raises(UnknownType, match="Ghost"):
        SchemaCodec(document)


def test_sub_codecs_resolve_cyclic_types(codec: SchemaCodec) -> None:
    user = codec.codec("User")
    team = user["team"].resolve_sub_codec()
    assert team is codec.codec("Team")
    assert team["members"].resolve_sub_codec() is user
    assert user["name"].sub_codec is None
    assert user["name"].args is None
    assert user["friends"].args["first"].type_name == "Int"


def test_document_roundtrip_builds_same_codecs() -> None:
    document = document_from_sdl(SDL)
    sc = SchemaCodec(document, scalars=create_scalars(Date=DATE))
    assert sc.document is document
    assert set(sc.codec("Query")) == {"getUser", "users", "today"}
