from __future__ import annotations

import warnings

import pytest

from stylehelper import StyleTypeError, StyleWarning, multi, objectify


def test_objectify_single_pair() -> None:
    assert objectify("padding", 10) == {"padding": 10}


def test_objectify_key_list_shares_value() -> None:
    value = {"margin": 10}
    result = objectify([".a", ".b"], value)
    assert result == {".a": {"margin": 10}, ".b": {"margin": 10}}
    assert result[".a"] is value
    assert result[".b"] is value


def test_objectify_accepts_pair_tuples() -> None:
    result = objectify(("color", "red"), ([".x", ".y"], {"margin": 0}))
    assert list(result) == ["color", ".x", ".y"]


def test_objectify_accepts_list_of_pairs() -> None:
    assert objectify([("a", 1), ("b", 2)]) == {"a": 1, "b": 2}


def test_objectify_later_duplicates_win_in_place() -> None:
    result = objectify("a", 1, "b", 2, "a", 3)
    assert result == {"a": 3, "b": 2}
    assert list(result) == ["a", "b"]


def test_objectify_does_not_merge_values() -> None:
    result = objectify(("a", {"x": 1}), ("a", {"y": 2}))
    assert result == {"a": {"y": 2}}


def test_objectify_odd_flat_arguments_raise() -> None:
    with pytest.raises(StyleTypeError):
        objectify("a", 1, "b")


def test_objectify_non_string_key_warns() -> None:
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        assert objectify(5, "x") == {5: "x"}
    assert any(isinstance(w.message, StyleWarning) for w in caught)


def test_multi_repeats_style_for_each_selector() -> None:
    style = {"color": "red"}
    result = multi(["h1", "h2"], style)
    assert result == {"h1": style, "h2": style}
    assert result["h2"] is style


def test_objectify_tuple_arguments_are_read_as_pairs_first() -> None:
    assert objectify(("h1", "h2"), ("bold", "italic")) == {"h1": "h2", "bold": "italic"}
    value = ("bold", "italic")
    result = objectify(["h1", "h2"], value)
    assert result == {"h1": value, "h2": value}
