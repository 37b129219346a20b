from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, Union

from .errors import StyleTypeError, warn

Key = Union[str, Sequence[str]]


def _is_key_list(key: Any) -> bool:
    return isinstance(key, (list, tuple))


def _is_pair(item: Any) -> bool:
    return isinstance(item, tuple) and len(item) == 2


def _normalize_pairs(args: tuple[Any, ...]) -> list[tuple[Key, Any]]:
    # objectify(("a", 1), (["b", "c"], 2))
    if args and all(_is_pair(arg) for arg in args):
        return list(args)
    # objectify([("a", 1), ("b", 2)])
    if len(args) == 1 and isinstance(args[0], list) and all(_is_pair(item) for item in args[0]):
        return list(args[0])
    # objectify("padding", 10, "margin", 0)
    if len(args) % 2:
        raise StyleTypeError(
            f"objectify() expects (key, value) pairs or alternating keys and values, got {len(args)} arguments"
        )
    return [(args[i], args[i + 1]) for i in range(0, len(args), 2)]


def _assign(result: dict[str, Any], key: Any, value: Any) -> None:
    if not isinstance(key, str):
        warn(f"objectify() key {key!r} is not a string; using it as-is")
    result[key] = value


def objectify(*args: Any) -> dict[str, Any]:
    """Turn a list of ``(key, value)`` pairs into a style.

    A key may be a list of selectors, in which case the same value object is
    stored under every selector. Later keys overwrite earlier ones.

    Accepted shapes, checked in this order:

    * ``objectify(("a", 1), ([".b", ".c"], 2))``: every argument is a
      2-tuple, so each one is a ``(key, value)`` pair.
    * ``objectify([("a", 1), ("b", 2)])``: a single list of pairs.
    * ``objectify("padding", 10, [".a", ".b"], style)``: alternating keys
      and values.

    Because the pair form wins, ``objectify(("h1", "h2"), ("bold", "italic"))``
    means ``{"h1": "h2", "bold": "italic"}``. Use a list for a key-list in the
    alternating form: ``objectify(["h1", "h2"], ("bold", "italic"))``.
    """
    result: dict[str, Any] = {}
    for key, value in _normalize_pairs(args):
        if _is_key_list(key):
            for k in key:
                _assign(result, k, value)
        else:
            _assign(result, key, value)
    return result


def multi(selectors: Iterable[str], style: Any) -> dict[str, Any]:
    """Repeat the same style for multiple selectors."""
    result: dict[str, Any] = {}
    for selector in selectors:
        result[selector] = style
    return result
