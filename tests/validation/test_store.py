# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Unit tests for the violation store: recording, merge order and rendering."""

from __future__ import annotations

from fieldguard.validation.store import (
    bracketed,
    merge_violations,
    record_violation,
    render_value,
    render_violations,
)


def test_record_violation_creates_and_appends():
    store = {}

    record_violation(store, "a", "one")
    record_violation(store, "a", "two")
    record_violation(store, "b", "three")

    assert store == {"a": ["one", "two"], "b": ["three"]}


def test_merge_appends_source_after_target():
    target = {"x": ["parent"]}
    source = {"x": ["child"], "y": ["only child"]}

    result = merge_violations(target, source)

    assert result is target
    assert target == {"x": ["parent", "child"], "y": ["only child"]}


def test_merge_inserts_new_lists_without_copying():
    source_list = ["m"]

    target = merge_violations({}, {"k": source_list})

    assert target["k"] is source_list


def test_merge_keeps_duplicates():
    target = merge_violations({"x": ["same"]}, {"x": ["same"]})

    assert target == {"x": ["same", "same"]}


def test_merge_into_itself_is_noop():
    store = {"x": ["once"]}

    merge_violations(store, store)

    assert store == {"x": ["once"]}


def test_merge_order_depends_on_direction():
    left = merge_violations({"x": ["a"]}, {"x": ["b"]})
    right = merge_violations({"x": ["b"]}, {"x": ["a"]})

    assert left["x"] == ["a", "b"]
    assert right["x"] == ["b", "a"]
    assert sorted(left["x"]) == sorted(right["x"])


def test_independent_sessions_can_be_combined():
    first = {"order.id": ["must not be EMPTY"]}
    second = {"order.id": ["must not be NULL"], "customer": ["must not be NULL"]}

    combined = merge_violations(merge_violations({}, first), second)

    assert combined == {
        "order.id": ["must not be EMPTY", "must not be NULL"],
        "customer": ["must not be NULL"],
    }


def test_render_violations_flattens_in_store_order():
    store = {"b": ["first", "second"], "a": ["third"]}

    assert render_violations(store) == ["b first", "b second", "a third"]


def test_bracketed():
    assert bracketed([]) == "[]"
    assert bracketed(["x", 1, None]) == "[x, 1, None]"


class _ReprOnly:
    def __str__(self):
        raise ValueError("no str")

    def __repr__(self):
        return "_ReprOnly()"


def test_render_value_falls_back_to_repr():
    assert render_value(_ReprOnly()) == "_ReprOnly()"
    assert bracketed([_ReprOnly(), 1]) == "[_ReprOnly(), 1]"
