from datetime import date

import pytest
from pydantic import ValidationError

from gqlfreeze.core.codec import CodecField
from gqlfreeze.core.decoder import (
    GraphQLResponse,
    decode_list,
    decode_null,
    decode_object,
    decode_response,
    encode_list,
    encode_null,
    encode_object,
)
from gqlfreeze.core.errors import (
    ExpectedArray,
    ExpectedObject,
    MissingDecoder,
    MissingEncoder,
    ResponseError,
)
from gqlfreeze.core.scalars import scalar

DATE = scalar(encode=lambda d: d.isoformat(), decode=date.fromisoformat)

POST: dict[str, CodecField] = {
    "title": CodecField(decode=lambda v: v),
    "published": CodecField(decode=lambda v: decode_null(v, DATE.decode)),
}

AUTHOR: dict[str, CodecField] = {
    "name": CodecField(decode=lambda v: v),
    # [Post!] (nullable list of objects)
    "posts": CodecField(
        decode=lambda v: decode_null(v, lambda xs: decode_list(xs, lambda p: decode_object(p, POST))),
        sub_codec=lambda: POST,
    ),
}

ROOT = {"author": CodecField(decode=lambda v: decode_object(v, AUTHOR), sub_codec=lambda: AUTHOR)}


def test_scalar_transforms_applied_recursively() -> None:
    decoded = decode_object(
        {"author": {"name": "Ada", "posts": [{"title": "Notes", "published": "1843-10-01"}]}},
        ROOT,
    )

    assert decoded == {
        "author": {"name": "Ada", "posts": [{"title": "Notes", "published": date(1843, 10, 1)}]}
    }


@pytest.mark.parametrize(
    "wire,expected",
    [
        (None, None),
        ([], []),
        (
            [{"title": "a"}, {"title": "b", "published": None}],
            [{"title": "a"}, {"title": "b", "published": None}],
        ),
    ],
)
def test_nullable_list_of_objects(wire: object, expected: object) -> None:
    decoded = decode_object({"posts": wire}, AUTHOR)
    assert decoded == {"posts": expected}


def test_decode_only_visits_present_keys() -> None:
    assert decode_object({"name": "Ada"}, AUTHOR) == {"name": "Ada"}
    assert decode_object({}, AUTHOR) == {}


def test_missing_decoder_names_the_field() -> None:
    with pytest.raises(MissingDecoder) as info:
        decode_object({"name": "Ada", "extraField": 1}, AUTHOR)
    assert info.value.field == "extraField"
    assert "extraField" in str(info.value)


def test_lenient_decoding_skips_unknown_keys() -> None:
    assert decode_object({"name": "Ada", "extraField": 1}, AUTHOR, strict=False) == {"name": "Ada"}


@pytest.mark.parametrize("wire", ["not an object", None, 3, ["a"]])
def test_expected_object(wire: object) -> None:
    with pytest.raises(ExpectedObject):
        decode_object(wire, ROOT)


def test_nested_shape_error_aborts_whole_decode() -> None:
    with pytest.raises(ExpectedArray):
        decode_object({"author": {"name": "Ada", "posts": "none"}}, ROOT)


def test_decode_list_preserves_order_and_length() -> None:
    assert decode_list([3, 1, 2, 1], str) == ["3", "1", "2", "1"]
    assert decode_list((1, 2), str) == ["1", "2"]
    with pytest.raises(ExpectedArray):
        decode_list("abc", str)
    with pytest.raises(ExpectedArray):
        decode_list({"a": 1}, str)


def test_decode_null_passes_none_through() -> None:
    assert decode_null(None, int) is None
    assert decode_null("5", int) == 5


def test_encode_helpers_mirror_decode() -> None:
    encoder = {
        "day": lambda v: encode_null(v, DATE.encode),
        "tags": lambda v: encode_list(v, str),
    }

    assert encode_object({"day": date(2024, 1, 2), "tags": [1, 2]}, encoder) == {
        "day": "2024-01-02",
        "tags": ["1", "2"],
    }
    assert encode_object({"day": None}, encoder) == {"day": None}

    with pytest.raises(MissingEncoder, match="color"):
        encode_object({"color": "red"}, encoder)
    with pytest.raises(ExpectedObject):
        encode_object("day", encoder)
    with pytest.raises(ExpectedArray):
        encode_list(5, str)


def test_decode_response_envelope() -> None:
    payload = {"data": {"author": {"name": "Ada"}}, "extensions": {"cost": 1}}
    assert decode_response(payload, ROOT) == {"author": {"name": "Ada"}}


def test_decode_response_raises_on_errors() -> None:
    payload = {"data": None, "errors": [{"message": "not allowed", "path": ["author"]}]}

    with pytest.raises(ResponseError, match="not allowed") as info:
        decode_response(payload, ROOT)
    assert info.value.errors[0]["path"] == ["author"]


def test_decode_response_without_data_is_expected_object() -> None:
    with pytest.raises(ExpectedObject):
        decode_response(GraphQLResponse(), ROOT)


def test_decode_response_rejects_malformed_envelope() -> None:
    with pytest.raises(ValidationError):
        decode_response({"errors": "boom"}, ROOT)
