from __future__ import annotations

from itertools import permutations

import pytest

from csvnest.models.nested import MAX_INDEX, PathSegment
from csvnest.services.assembler import build_record
from csvnest.services.structure import parse_path, set_nested_value


def _build(pairs):
    record = {}
    for header, value in pairs:
        set_nested_value(record, header, value)
    return record


def test_parse_path_segment_shapes():
    segs = parse_path("a.0.b.12")
    assert [s.text for s in segs] == ["a", "0", "b", "12"]
    assert [s.index for s in segs] == [None, 0, None, 12]


@pytest.mark.parametrize("token", ["-1", "1a", "+2", "", "１"])
def test_non_digit_tokens_are_field_names(token):
    assert PathSegment.from_token(token).is_index is False


def test_index_range_boundary():
    assert PathSegment.from_token(str(MAX_INDEX)).index == MAX_INDEX
    assert PathSegment.from_token(str(MAX_INDEX + 1)).is_index is False


def test_oversized_digit_token_is_field_name():
    # リスト確保せずマップのキーとして扱う
    record = build_record(["name", "id.99999999999"], ["a", "x"])
    assert record == {"name": "a", "id": {"99999999999": "x"}}
    assert _build([("ts.20240101000000", 1)]) == {"ts": {"20240101000000": 1}}


def test_blank_header_has_no_segments_and_sets_nothing():
    assert parse_path("") == []
    record = {"x": 1}
    set_nested_value(record, "", "ignored")
    assert record == {"x": 1}


def test_flat_field():
    assert _build([("city", "Tokyo")]) == {"city": "Tokyo"}


def test_nested_maps():
    assert _build([("address.city", "Tokyo")]) == {"address": {"city": "Tokyo"}}


def test_sibling_fields_share_container_in_any_order():
    expected = {"a": {"b": 1, "c": 2}}
    for order in permutations([("a.b", 1), ("a.c", 2)]):
        assert _build(order) == expected


def test_array_gaps_are_padded_with_none():
    record = _build([("skills.0", "x"), ("skills.2", "y")])
    assert record == {"skills": ["x", None, "y"]}


def test_array_length_follows_highest_index_regardless_of_order():
    record = _build([("skills.2", "y"), ("skills.0", "x")])
    assert record == {"skills": ["x", None, "y"]}


def test_array_of_objects():
    record = _build([("items.0.id", 1), ("items.1.id", 2), ("items.0.qty", 5)])
    assert record == {"items": [{"id": 1, "qty": 5}, {"id": 2}]}


def test_array_of_arrays():
    record = _build([("m.0.1", "b"), ("m.1.0", "c"), ("m.0.0", "a")])
    assert record == {"m": [["a", "b"], ["c"]]}


def test_deep_mixed_path():
    record = _build([("a.1.b.0.c", True)])
    assert record == {"a": [None, {"b": [{"c": True}]}]}


def test_top_level_index_header_becomes_list_field():
    assert _build([("0", "v")]) == {"0": ["v"]}
    assert _build([("1.x", "v")]) == {"1": [None, {"x": "v"}]}


def test_none_value_is_stored():
    assert _build([("a.b", None)]) == {"a": {"b": None}}


def test_conflicting_shapes_last_path_wins():
    # マップ -> 配列
    assert _build([("a.b", 1), ("a.0", 2)]) == {"a": [2]}
    # 配列 -> マップ
    assert _build([("a.0", 2), ("a.b", 1)]) == {"a": {"b": 1}}


def test_scalar_then_container_and_back():
    assert _build([("a", 1), ("a.b", 2)]) == {"a": {"b": 2}}
    assert _build([("a.b", 2), ("a", 1)]) == {"a": 1}


def test_scalar_in_list_slot_replaced_by_container():
    assert _build([("a.0", "x"), ("a.0.k", "y")]) == {"a": [{"k": "y"}]}


def test_empty_segment_is_a_field_name():
    assert _build([("a..b", 1)]) == {"a": {"": {"b": 1}}}


def test_existing_containers_are_reused_not_replaced():
    record = {}
    set_nested_value(record, "a.b", 1)
    inner = record["a"]
    set_nested_value(record, "a.c", 2)
    assert record["a"] is inner
