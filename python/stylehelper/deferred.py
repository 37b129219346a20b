from __future__ import annotations

from typing import Callable, Generic, TypeVar

from .errors import CircularReferenceError

T = TypeVar("T")

PENDING = "pending"
RUNNING = "running"
RESOLVED = "resolved"


class Deferred(Generic[T]):
    """Memoized thunk: computes its value on the first ``force()`` and caches it.

    A failing computation leaves the cell pending and re-raises. Forcing a
    cell from inside its own computation raises ``CircularReferenceError``.
    """

    __slots__ = ("_compute", "_value", "_state", "label")

    def __init__(self, compute: Callable[[], T], *, label: str = "") -> None:
        self._compute = compute
        self._value: T | None = None
        self._state = PENDING
        self.label = label

    @property
    def state(self) -> str:
        return self._state

    @property
    def is_resolved(self) -> bool:
        return self._state == RESOLVED

    def force(self) -> T:
        if self._state == RESOLVED:
            return self._value  # type: ignore[return-value]
        if self._state == RUNNING:
            raise CircularReferenceError(f"{self.label or 'deferred value'} depends on itself")
        self._state = RUNNING
        try:
            value = self._compute()
        except BaseException:
            self._state = PENDING
            raise
        self._value = value
        self._state = RESOLVED
        return value

    def __repr__(self) -> str:
        if self._state == RESOLVED:
            return f"Deferred({self._value!r})"
        return f"Deferred(<{self._state}>)"
