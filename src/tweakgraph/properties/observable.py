"""Observable base class and the ``UNSET`` sentinel.

Observers are plain callables held in an explicit list owned by each
observable.  Notification is synchronous and fans out to every observer
in registration order.
"""
from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

Observer = Callable[[Any], None]


class _Unset:
    """Marker for "no value yet", distinct from ``None``, ``0`` and ``""``."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


def is_unset(value: object) -> bool:
    """Return ``True`` if ``value`` is the :data:`UNSET` sentinel."""
    return value is UNSET


@runtime_checkable
class SupportsObservers(Protocol):
    """Anything a :class:`~tweakgraph.properties.DerivedProperty` can follow."""

    def add_observer(self, observer: Observer) -> None: ...


class Observable:
    """Owns an ordered observer list and fires values into it."""

    def __init__(self) -> None:
        self._observers: list[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        """Subscribe ``observer``.

        Subclasses holding a value replay it to the new observer
        immediately.
        """
        self._observers.append(observer)

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def _fire(self, value: Any) -> None:
        # Snapshot so an observer subscribing during fan-out sees only its replay.
        for observer in list(self._observers):
            observer(value)
