# SPDX-License-Identifier: AGPL-3.0-only
"""Composable CSS-in-Python style objects.

Merges nested style mappings, expands selector lists, and registers style
sheets (with deferred, cross-referencing entries) against a registry that
assigns generated class names and emits the CSS.
"""
from .errors import (
    CircularReferenceError,
    ConfigError,
    StyleHelperError,
    StyleTypeError,
    StyleWarning,
    UnresolvedReferenceError,
)
from .merge import merge
from .objectify import multi, objectify
from .registry import Registry
from .sheet import (
    HashRule,
    IdentifierMap,
    RegistrationOptions,
    StyleSheetRegistrar,
    register_style_sheet,
)
from .strings import em, escape, pct, pt, px, quote, rem, url, vh, vw
from .tree import Leaf, Node, from_tree, is_style, to_tree

__all__ = [
    "CircularReferenceError",
    "ConfigError",
    "HashRule",
    "IdentifierMap",
    "Leaf",
    "Node",
    "Registry",
    "RegistrationOptions",
    "StyleHelperError",
    "StyleSheetRegistrar",
    "StyleTypeError",
    "StyleWarning",
    "UnresolvedReferenceError",
    "em",
    "escape",
    "from_tree",
    "is_style",
    "merge",
    "multi",
    "objectify",
    "pct",
    "pt",
    "px",
    "quote",
    "register_style_sheet",
    "rem",
    "to_tree",
    "url",
    "vh",
    "vw",
]
