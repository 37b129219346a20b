from __future__ import annotations

from typing import Any

_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\n": "\\A",
}

_ESCAPE_TABLE = str.maketrans(_ESCAPES)


def escape(value: str) -> str:
    """Escape a string for use inside CSS double quotes."""
    return str(value).translate(_ESCAPE_TABLE)


def quote(value: str) -> str:
    return f'"{escape(value)}"'


def url(value: str) -> str:
    """Wrap a string in a CSS ``url()`` function."""
    return f"url({quote(value)})"


def _unit(value: Any, suffix: str) -> str:
    return f"{value}{suffix}"


def px(value: Any) -> str:
    return _unit(value, "px")


def pt(value: Any) -> str:
    return _unit(value, "pt")


def em(value: Any) -> str:
    return _unit(value, "em")


def rem(value: Any) -> str:
    return _unit(value, "rem")


def pct(value: Any) -> str:
    return _unit(value, "%")


def vh(value: Any) -> str:
    return _unit(value, "vh")


def vw(value: Any) -> str:
    return _unit(value, "vw")
