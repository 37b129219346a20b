"""Style sheet registration.

A sheet maps logical names to styles. Each value is either a style mapping or
a deferred style function ``fn(styles, keyframes, hash_rules)`` that receives
the identifier maps built so far and returns a style, so one entry can embed
another entry's generated identifier.

Registration order is fixed: keyframes, hash rules, sheet styles, rules and
finally global css. In eager mode every entry is registered in that order
during the call. In lazy mode keyframes, hash rules and sheet styles are only
registered when their identifier is first read; entries nobody reads never
reach the registry. Either way each logical name is registered at most once.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from functools import partial
from typing import Any, Callable, Iterator, Optional, Union

from .deferred import Deferred
from .errors import StyleHelperError, StyleTypeError, UnresolvedReferenceError, warn
from .registry import Registry
from .tree import StyleLike, is_style

logger = logging.getLogger(__name__)

StyleFn = Callable[["IdentifierMap", "IdentifierMap", "IdentifierMap"], StyleLike]
StyleValue = Union[StyleLike, StyleFn]
StyleSheet = Mapping[str, StyleValue]


class IdentifierMap(Mapping[str, str]):
    """Read-only mapping of logical names to generated identifiers.

    Reading a pending lazy entry registers it. Reading a name that is unknown,
    or not registered yet in eager mode, raises ``UnresolvedReferenceError``;
    ``get()`` returns the default for undeclared names only; errors raised
    while resolving a declared entry propagate. Membership tests and
    iteration never trigger registration.
    """

    def __init__(self, category: str) -> None:
        self.category = category
        self._cells: dict[str, Deferred[str]] = {}

    def _declare(self, name: str, cell: Deferred[str]) -> None:
        if name in self._cells:
            raise StyleHelperError(f"{self.category} entry {name!r} is already registered")
        self._cells[name] = cell

    def _forget(self, name: str) -> None:
        self._cells.pop(name, None)

    def __getitem__(self, name: str) -> str:
        cell = self._cells.get(name)
        if cell is None:
            raise UnresolvedReferenceError(name, self.category)
        if not cell.is_resolved:
            logger.debug("resolving lazy %s entry %r", self.category, name)
        return cell.force()

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        # Only an undeclared name falls back; failures while resolving propagate.
        if name not in self._cells:
            return default
        return self[name]

    def __contains__(self, name: object) -> bool:
        return name in self._cells

    def __iter__(self) -> Iterator[str]:
        return iter(self._cells)

    def __len__(self) -> int:
        return len(self._cells)

    def is_resolved(self, name: str) -> bool:
        cell = self._cells.get(name)
        return cell is not None and cell.is_resolved

    def resolved(self) -> dict[str, str]:
        """Identifiers computed so far, without forcing pending entries."""
        return {name: cell.force() for name, cell in self._cells.items() if cell.is_resolved}

    def __repr__(self) -> str:
        parts = [
            f"{name!r}: {cell.force()!r}" if cell.is_resolved else f"{name!r}: <{cell.state}>"
            for name, cell in self._cells.items()
        ]
        return f"IdentifierMap({self.category}, {{{', '.join(parts)}}})"


@dataclass(frozen=True)
class HashRule:
    """A style registered under an explicit prefix (e.g. ``@font-face``)."""

    prefix: str
    style: StyleValue

    @classmethod
    def coerce(cls, value: Any) -> "HashRule":
        if isinstance(value, HashRule):
            return value
        if isinstance(value, (tuple, list)) and len(value) == 2:
            return cls(prefix=value[0], style=value[1])
        raise StyleTypeError(f"hash rule must be HashRule or (prefix, style), got {value!r}")


_OPTION_ALIASES = {"hashRules": "hash_rules"}


@dataclass
class RegistrationOptions:
    lazy: bool = False
    keyframes: Optional[Mapping[str, StyleValue]] = None
    rules: Optional[Union[Sequence[tuple[str, StyleValue]], Mapping[str, StyleValue]]] = None
    hash_rules: Optional[Mapping[str, Union[HashRule, tuple[str, StyleValue]]]] = None
    css: Optional[StyleValue] = None

    @classmethod
    def coerce(cls, value: Any) -> "RegistrationOptions":
        if value is None:
            return cls()
        if isinstance(value, RegistrationOptions):
            return value
        if not isinstance(value, Mapping):
            raise StyleTypeError(f"registration options must be a mapping, got {type(value).__name__}")
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, option in value.items():
            key = _OPTION_ALIASES.get(raw_key, raw_key)
            if key not in known:
                raise StyleTypeError(f"unknown registration option {raw_key!r}")
            kwargs[key] = option
        return cls(**kwargs)


def _items(entries: Any) -> list[tuple[Any, Any]]:
    if not entries:
        return []
    if isinstance(entries, Mapping):
        return list(entries.items())
    return [tuple(entry) for entry in entries]


class StyleSheetRegistrar:
    """Drives one registration call against a registry.

    Owns the ``styles``, ``keyframes`` and ``hash_rules`` identifier maps.
    Deferred style functions receive those maps as read-only views.
    """

    def __init__(self, registry: Registry, scope: Optional[str] = None) -> None:
        self.registry = registry
        self.scope = scope
        self.styles = IdentifierMap("styles")
        self.keyframes = IdentifierMap("keyframes")
        self.hash_rules = IdentifierMap("hash_rules")

    def display_name(self, name: str) -> str:
        return f"{self.scope}_{name}" if self.scope else name

    def resolve(self, value: StyleValue, label: str) -> StyleLike:
        style = value(self.styles, self.keyframes, self.hash_rules) if callable(value) else value
        if not is_style(style):
            raise StyleTypeError(f"{label} must be a style mapping, got {type(style).__name__}")
        return style

    def register(
        self,
        sheet: Optional[StyleSheet] = None,
        options: Union[RegistrationOptions, Mapping[str, Any], None] = None,
    ) -> IdentifierMap:
        opts = RegistrationOptions.coerce(options)

        for name, value in _items(opts.keyframes):
            self._declare(self.keyframes, name, partial(self._register_keyframes, name, value), opts.lazy)
        for name, rule in _items(opts.hash_rules):
            compute = partial(self._register_hash_rule, name, HashRule.coerce(rule))
            self._declare(self.hash_rules, name, compute, opts.lazy)
        for name, value in _items(sheet):
            self._declare(self.styles, name, partial(self._register_style, name, value), opts.lazy)
        for selector, value in _items(opts.rules):
            self._register_rule(selector, value)
        if opts.css is not None and (callable(opts.css) or opts.css):
            self._register_css(opts.css)

        return self.styles

    def _declare(self, target: IdentifierMap, name: str, compute: Callable[[], str], lazy: bool) -> None:
        cell = Deferred(compute, label=f"{target.category}[{name!r}]")
        target._declare(name, cell)
        if lazy:
            return
        try:
            cell.force()
        except BaseException:
            target._forget(name)
            raise

    def _register_keyframes(self, name: str, value: StyleValue) -> str:
        style = self.resolve(value, f"keyframes {name!r}")
        if not style:
            warn(f"keyframes {name!r} has an empty body")
        logger.debug("register_keyframes %r", name)
        return self.registry.register_keyframes(style, name)

    def _register_hash_rule(self, name: str, rule: HashRule) -> str:
        style = self.resolve(rule.style, f"hash rule {name!r}")
        display_name = self.display_name(name)
        logger.debug("register_hash_rule %r %r as %r", rule.prefix, name, display_name)
        return self.registry.register_hash_rule(rule.prefix, style, display_name)

    def _register_style(self, name: str, value: StyleValue) -> str:
        style = self.resolve(value, f"style {name!r}")
        display_name = self.display_name(name)
        logger.debug("register_style %r as %r", name, display_name)
        return self.registry.register_style(style, display_name)

    def _register_rule(self, selector: str, value: StyleValue) -> None:
        style = self.resolve(value, f"rule {selector!r}")
        logger.debug("register_rule %r", selector)
        self.registry.register_rule(selector, style)

    def _register_css(self, value: StyleValue) -> None:
        style = self.resolve(value, "css")
        logger.debug("register_css")
        self.registry.register_css(style)


def register_style_sheet(
    registry: Registry,
    sheet: Optional[StyleSheet] = None,
    options: Union[RegistrationOptions, Mapping[str, Any], None] = None,
    scope_name: Optional[str] = None,
) -> IdentifierMap:
    """Register *sheet* and its companion collections, returning the style identifiers."""
    return StyleSheetRegistrar(registry, scope=scope_name).register(sheet, options)
