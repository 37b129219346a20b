"""Style tree variant.

A style is a finite tree: ``Node`` holds an ordered mapping of selector or
property keys to children, ``Leaf`` holds a declaration value (a scalar or a
sequence of scalars). Leaf values are kept by reference so converting a plain
style to a tree and back does not copy them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Union

Scalar = Union[str, int, float, bool, None]
StyleLike = Mapping[str, Any]


@dataclass(frozen=True)
class Leaf:
    value: Any


@dataclass(frozen=True)
class Node:
    children: dict[str, "Leaf | Node"] = field(default_factory=dict)


StyleTree = Union[Leaf, Node]


def is_style(value: Any) -> bool:
    """Return True if *value* is shaped like a style (any mapping)."""
    return isinstance(value, Mapping)


def to_tree(value: Any) -> StyleTree:
    if is_style(value):
        return Node({key: to_tree(child) for key, child in value.items()})
    return Leaf(value)


def from_tree(tree: StyleTree) -> Any:
    if isinstance(tree, Node):
        return {key: from_tree(child) for key, child in tree.children.items()}
    return tree.value
