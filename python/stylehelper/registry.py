"""Registry collaborator interface.

The registry hashes style bodies, deduplicates them, assigns generated
identifiers and emits the final CSS. stylehelper only drives it through the
methods below. Registries usually also offer a read-only ``get_styles()``
for their own consumers; the registrar never calls it. A registry shared by
several registrations must serialize or tolerate concurrent calls itself;
the registrar never locks.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, runtime_checkable

Style = Mapping[str, Any]


@runtime_checkable
class Registry(Protocol):
    def register_style(self, style: Style, display_name: Optional[str] = None) -> str: ...

    def register_keyframes(self, style: Style, display_name: Optional[str] = None) -> str: ...

    def register_hash_rule(
        self, prefix: str, style: Style, display_name: Optional[str] = None
    ) -> str: ...

    def register_rule(self, selector: str, style: Style) -> None: ...

    def register_css(self, style: Style) -> None: ...

