"""Tests for sqlbatch.utils.serializers."""

import datetime
from decimal import Decimal

from sqlbatch.utils.serializers import from_json, to_json


def test_to_json_is_compact() -> None:
    assert to_json({"a": [1, 2]}) == '{"a":[1,2]}'


def test_to_json_as_bytes() -> None:
    assert to_json([1, "x"], as_bytes=True) == b'[1,"x"]'


def test_to_json_tuples_are_arrays() -> None:
    assert to_json((1, 2)) == "[1,2]"


def test_to_json_builtin_extended_types() -> None:
    assert to_json(Decimal("1.50")) == '"1.50"'
    assert to_json(datetime.date(2024, 1, 2)) == '"2024-01-02"'


def test_to_json_falls_back_to_str() -> None:
    class Marker:
        def __str__(self) -> str:
            return "marker"

    assert to_json({"m": Marker()}) == '{"m":"marker"}'


def test_from_json() -> None:
    assert from_json('{"a":[1,null]}') == {"a": [1, None]}
    assert from_json(b"[true]") == [True]


def test_from_json_bytes_passthrough() -> None:
    assert from_json(b"[1]", decode_bytes=False) == b"[1]"
