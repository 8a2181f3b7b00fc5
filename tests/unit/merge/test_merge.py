"""
slimconf — unit tests for the document merge engine

File: tests/unit/merge/test_merge.py
Last updated: 2026-10-17

Purpose
- Validate right-biased deep merge semantics.

What this test file should cover
- Overwrite, promote, nested union, and sequence replacement rules.
- Identity, idempotence, and non-interference.
- Inputs are never mutated; foreign mappings are canonicalized.
"""

from __future__ import annotations

import copy
from collections import OrderedDict
from types import MappingProxyType

import pytest

from slimconf.merge import merge_all, merge_documents

try:
    from hypothesis import given, settings
    from hypothesis import strategies as st
except ModuleNotFoundError:
    _HYPOTHESIS_AVAILABLE = False
else:
    _HYPOTHESIS_AVAILABLE = True


def test_scalar_overlay_replaces_map() -> None:
    assert merge_documents({"a": {"d": 3, "e": 4}}, {"a": "x"}) == {"a": "x"}


def test_map_overlay_replaces_scalar() -> None:
    assert merge_documents({"a": 1}, {"a": {"f": "x"}}) == {"a": {"f": "x"}}


def test_nested_maps_are_unioned() -> None:
    merged = merge_documents({"c": {"d": 3}}, {"b": 2, "c": {"e": 4}})

    assert merged == {"b": 2, "c": {"d": 3, "e": 4}}


def test_sequences_are_replaced_whole() -> None:
    merged = merge_documents({"hosts": ["a", "b", "c"]}, {"hosts": ["z"]})

    assert merged == {"hosts": ["z"]}


def test_explicit_none_overrides_base_value() -> None:
    assert merge_documents({"a": 1}, {"a": None}) == {"a": None}


def test_identity_and_idempotence() -> None:
    document = {"a": 1, "b": {"c": [1, 2], "d": {"e": "f"}}}

    assert merge_documents({}, document) == document
    assert merge_documents(document, {}) == document
    assert merge_documents(document, document) == document


def test_inputs_are_not_mutated() -> None:
    base = {"c": {"d": 3}, "list": [1]}
    overlay = {"c": {"e": 4}, "list": [2]}
    base_before = copy.deepcopy(base)
    overlay_before = copy.deepcopy(overlay)

    merged = merge_documents(base, overlay)
    merged["c"]["d"] = 99
    merged["list"].append(3)

    assert base == base_before
    assert overlay == overlay_before


def test_foreign_mappings_are_canonicalized_and_merged() -> None:
    base = {"c": MappingProxyType({1: "one", "d": 3})}
    overlay = OrderedDict([("c", {"e": 4}), (2, ("x", "y"))])

    merged = merge_documents(base, overlay)

    assert merged == {"c": {"1": "one", "d": 3, "e": 4}, "2": ["x", "y"]}
    assert type(merged["c"]) is dict


def test_merge_all_folds_left_to_right() -> None:
    ref1 = {"foo": "xxx", "a": 1, "c": {"d": 4}}
    ref2 = {"foo": "yyy", "a": 1, "c": {"e": 5}}

    assert merge_all([ref1, ref2]) == {"foo": "yyy", "a": 1, "c": {"d": 4, "e": 5}}
    assert merge_all([]) == {}


def test_non_mapping_inputs_are_rejected() -> None:
    with pytest.raises(TypeError):
        merge_documents({}, ["not", "a", "map"])  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        merge_documents("nope", {})  # type: ignore[arg-type]


if _HYPOTHESIS_AVAILABLE:
    _KEYS = st.text(alphabet="abcde", min_size=1, max_size=3)
    _SCALARS = st.one_of(st.none(), st.booleans(), st.integers(), st.text(max_size=5))
    _VALUES = st.recursive(
        _SCALARS,
        lambda children: st.one_of(
            st.lists(children, max_size=3),
            st.dictionaries(_KEYS, children, max_size=3),
        ),
        max_leaves=10,
    )
    _DOCUMENTS = st.dictionaries(_KEYS, _VALUES, max_size=4)

    @settings(max_examples=100, deadline=None)
    @given(document=_DOCUMENTS)
    def test_property_merge_is_idempotent_with_identity(document: dict[str, object]) -> None:
        assert merge_documents(document, document) == document
        assert merge_documents({}, document) == document

    @settings(max_examples=100, deadline=None)
    @given(base=_DOCUMENTS, overlay=_DOCUMENTS)
    def test_property_base_keys_untouched_by_overlay_survive(
        base: dict[str, object], overlay: dict[str, object]
    ) -> None:
        merged = merge_documents(base, overlay)

        for key, value in base.items():
            if key not in overlay:
                assert merged[key] == value
        for key, value in overlay.items():
            if not isinstance(value, dict):
                assert merged[key] == value

else:

    def test_property_merge_is_idempotent_with_identity() -> None:
        pytest.skip("hypothesis is not installed")

    def test_property_base_keys_untouched_by_overlay_survive() -> None:
        pytest.skip("hypothesis is not installed")
