from __future__ import annotations

from typing import Any

from .errors import StyleTypeError
from .tree import Node, StyleLike, StyleTree, from_tree, is_style, to_tree


def merge_trees(current: StyleTree, incoming: StyleTree) -> StyleTree:
    """Merge *incoming* over *current*; nested nodes merge, anything else is replaced."""
    if isinstance(current, Node) and isinstance(incoming, Node):
        children = dict(current.children)
        for key, child in incoming.children.items():
            existing = children.get(key)
            if existing is None:
                children[key] = child
            else:
                children[key] = merge_trees(existing, child)
        return Node(children)
    return incoming


def _as_node(style: Any, position: int) -> Node:
    if not is_style(style):
        raise StyleTypeError(
            f"merge() argument {position} must be a style mapping, got {type(style).__name__}"
        )
    return Node({key: to_tree(child) for key, child in style.items()})


def merge(*styles: StyleLike) -> dict[str, Any]:
    """Merge CSS styles recursively, later styles winning at every level.

    Inputs are left untouched and leaf values are carried over by reference.
    """
    result: StyleTree = Node()
    for position, style in enumerate(styles, start=1):
        result = merge_trees(result, _as_node(style, position))
    return from_tree(result)


__all__ = ["merge", "merge_trees"]
