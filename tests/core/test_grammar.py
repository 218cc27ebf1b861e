import pytest

from gqlfreeze.core.errors import CodecError
from gqlfreeze.core.grammar import OperationKind, is_graphql_name, operation_kind_from_value


def test_operation_kind_values_are_graphql_keywords() -> None:
    assert [k.value for k in OperationKind] == ["query", "mutation", "subscription"]


@pytest.mark.parametrize(
    "value,expected",
    [
        ("query", OperationKind.QUERY),
        ("Mutation", OperationKind.MUTATION),
        (OperationKind.SUBSCRIPTION, OperationKind.SUBSCRIPTION),
    ],
)
def test_operation_kind_from_value(value: object, expected: OperationKind) -> None:
    assert operation_kind_from_value(value) is expected


def test_operation_kind_rejects_unknown() -> None:
    with pytest.raises(CodecError):
        operation_kind_from_value("fragment")


@pytest.mark.parametrize("name", ["v", "_private", "getUser", "v10"])
def test_valid_names(name: str) -> None:
    assert is_graphql_name(name)


@pytest.mark.parametrize("name", ["", "1v", "has space", "dash-ed", "$v"])
def test_invalid_names(name: str) -> None:
    assert not is_graphql_name(name)
