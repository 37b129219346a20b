from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import pytest


ROOT = Path(__file__).resolve().parents[1]
PYTHON_SRC = ROOT / "python"

if str(PYTHON_SRC) not in sys.path:
    sys.path.insert(0, str(PYTHON_SRC))
else:
    sys.path.remove(str(PYTHON_SRC))
    sys.path.insert(0, str(PYTHON_SRC))


def _prefer_local_stylehelper_package() -> None:
    loaded = sys.modules.get("stylehelper")
    if loaded is None:
        return
    mod_file = getattr(loaded, "__file__", "") or ""
    if str(PYTHON_SRC / "stylehelper") in mod_file:
        return
    for name in list(sys.modules):
        if name == "stylehelper" or name.startswith("stylehelper."):
            sys.modules.pop(name, None)


_prefer_local_stylehelper_package()


def _block(selector: str, style: Mapping[str, Any]) -> str:
    decls = ";".join(f"{k}:{v}" for k, v in style.items() if not isinstance(v, Mapping))
    nested = "".join(_block(k, v) for k, v in style.items() if isinstance(v, Mapping))
    return f"{selector}{{{decls}}}{nested}"


class RecordingRegistry:
    """Registry fake that records every call and hands out sequential identifiers."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, ...]] = []
        self._css: list[str] = []
        self._counter = 0

    def _next_id(self, display_name: str | None) -> str:
        self._counter += 1
        return f"{display_name or 'f'}_{self._counter}"

    def register_style(self, style, display_name=None):
        ident = self._next_id(display_name)
        self.calls.append(("style", display_name, style))
        self._css.append(_block(f".{ident}", style))
        return ident

    def register_keyframes(self, style, display_name=None):
        ident = self._next_id(display_name)
        self.calls.append(("keyframes", display_name, style))
        frames = "".join(_block(k, v) for k, v in style.items())
        self._css.append(f"@keyframes {ident}{{{frames}}}")
        return ident

    def register_hash_rule(self, prefix, style, display_name=None):
        ident = self._next_id(display_name)
        self.calls.append(("hash_rule", display_name, prefix, style))
        self._css.append(_block(prefix, style))
        return ident

    def register_rule(self, selector, style):
        self.calls.append(("rule", selector, style))
        self._css.append(_block(selector, style))

    def register_css(self, style):
        self.calls.append(("css", style))
        self._css.append("".join(_block(k, v) for k, v in style.items()))

    def get_styles(self) -> str:
        return "".join(self._css)

    def kinds(self) -> list[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def registry() -> RecordingRegistry:
    return RecordingRegistry()
