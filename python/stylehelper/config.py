# SPDX-License-Identifier: AGPL-3.0-only
from pathlib import Path
from typing import Dict, Optional, Any
try:
    import tomllib
except ImportError:
    import tomli as tomllib

from .errors import ConfigError, warn
from .registry import Registry
from .sheet import RegistrationOptions, StyleSheetRegistrar

CONFIG_FILENAME = "stylehelper.toml"

# Default configuration structure
DEFAULT_CONFIG = {
    "registration": {
        "lazy": False,
        "scope": None,
    },
    "merge": {
        "indent": 2,
    },
}


class Config:
    def __init__(self, data: Dict[str, Any], path: Optional[Path] = None):
        self.data = data
        self.path = path
        self.root = path.parent if path else Path.cwd()
        self._check_keys()

    @classmethod
    def load(cls, path: Optional[Path] = None) -> "Config":
        """Load configuration from stylehelper.toml."""
        if path is None:
            path = Path.cwd() / CONFIG_FILENAME
            if not path.exists():
                # No project file: fall back to built-in defaults
                return cls.defaults()
        path = Path(path)
        if not path.exists():
            raise ConfigError(f"No {CONFIG_FILENAME} found at {path}")

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            raise ConfigError(f"Failed to parse {path}: {e}") from e

        return cls(data, path)

    @classmethod
    def defaults(cls) -> "Config":
        return cls({})

    def _check_keys(self) -> None:
        for section, values in self.data.items():
            known = DEFAULT_CONFIG.get(section)
            if known is None:
                warn(f"Ignoring unknown config section [{section}]")
                continue
            if not isinstance(values, dict):
                raise ConfigError(f"Config section [{section}] must be a table")
            for key in values:
                if key not in known:
                    warn(f"Ignoring unknown config key {section}.{key}")

    def _section(self, name: str) -> Dict[str, Any]:
        merged = dict(DEFAULT_CONFIG[name])
        merged.update(self.data.get(name, {}))
        return merged

    @property
    def registration(self) -> Dict[str, Any]:
        return self._section("registration")

    @property
    def merge(self) -> Dict[str, Any]:
        return self._section("merge")

    # Helpers for common fields
    def get_scope(self) -> Optional[str]:
        scope = self.registration.get("scope")
        return str(scope) if scope else None

    def get_indent(self) -> Optional[int]:
        indent = self.merge.get("indent")
        if indent is None:
            return None
        try:
            return int(indent)
        except (TypeError, ValueError) as e:
            raise ConfigError(f"merge.indent must be an integer, got {indent!r}") from e

    def registration_options(self, **overrides: Any) -> RegistrationOptions:
        """Build RegistrationOptions with the configured `lazy` default."""
        options: Dict[str, Any] = {"lazy": bool(self.registration.get("lazy", False))}
        options.update(overrides)
        return RegistrationOptions.coerce(options)

    def registrar(self, registry: Registry) -> StyleSheetRegistrar:
        """Create a registrar scoped with the configured `scope`."""
        return StyleSheetRegistrar(registry, scope=self.get_scope())
