from __future__ import annotations

import warnings


class StyleHelperError(Exception):
    """Base class for stylehelper failures."""


class StyleTypeError(StyleHelperError, TypeError):
    """A value that must be a style mapping is something else."""


class UnresolvedReferenceError(StyleHelperError, KeyError):
    def __init__(self, name: str, category: str = "styles") -> None:
        super().__init__(name)
        self.name = name
        self.category = category

    def __str__(self) -> str:
        return f"{self.category} identifier {self.name!r} is not available yet"


class CircularReferenceError(StyleHelperError, RuntimeError):
    pass


class ConfigError(StyleHelperError, ValueError):
    pass


class StyleWarning(UserWarning):
    """Warning emitted for suspicious style authoring inputs."""


def warn(msg: str) -> None:
    warnings.warn(msg, StyleWarning, stacklevel=3)
