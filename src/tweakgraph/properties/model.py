"""Typed, observable value holders attached to resources.

The property variants form a closed set identified by :class:`PropertyKind`.
Consumers dispatch on ``prop.kind`` (see :func:`expect_kind`) rather than
guessing from the class hierarchy, so a ``DerivedProperty`` is never
mistaken for a hand-settable scalar.

========================  =====================================================
Variant                   Semantics
========================  =====================================================
``ScalarProperty``        At most one value; ``set`` always overwrites.
``CollectionProperty``    Append-only ordered sequence.
``DerivedProperty``       Scalar recomputed from an upstream observable.
``LinkRelationship``      Set-once reference to another construct.
========================  =====================================================

Every variant replays its current value to a newly added observer.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import TYPE_CHECKING, Any

from tweakgraph.construct.trace import CreationTrace
from tweakgraph.errors import AlreadyLinkedError, TypeMismatchError
from tweakgraph.properties.observable import UNSET, Observable, Observer, SupportsObservers

if TYPE_CHECKING:
    from tweakgraph.construct.tree import Construct

logger = logging.getLogger(__name__)


class PropertyKind(Enum):
    """Discriminator for the closed set of property variants."""

    SCALAR = "scalar"
    COLLECTION = "collection"
    DERIVED = "derived"
    LINK = "link"


def _render(value: Any) -> Any:
    # Local import: resource depends on this module.
    from tweakgraph.resource.resource import render_value

    return render_value(value)


class Property(Observable):
    """Abstract base for all property variants."""

    kind: PropertyKind

    @property
    def value(self) -> Any:
        raise NotImplementedError

    @property
    def has_value(self) -> bool:
        return self.value is not UNSET

    def get(self) -> Any:
        """Return the current value, or :data:`UNSET`."""
        return self.value

    def add_observer(self, observer: Observer) -> None:
        super().add_observer(observer)
        if self.has_value:
            observer(self.value)

    def rendered(self) -> Any:
        """Return the value as it should appear in the output document."""
        return _render(self.value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class ScalarProperty(Property):
    """Holds at most one value.

    ``set`` always succeeds and overwrites.  "Set once" is a convention
    enforced by :class:`~tweakgraph.tweaks.ScalarTweak`, not here.
    """

    kind = PropertyKind.SCALAR

    def __init__(self, initial_value: Any = UNSET) -> None:
        super().__init__()
        self._value = initial_value
        self.change_trace: CreationTrace | None = None

    @property
    def value(self) -> Any:
        return self._value

    def set(self, value: Any) -> None:
        self.change_trace = CreationTrace.capture()
        self._value = value
        logger.debug("%r set to %r", self, value)
        self._fire(value)


class CollectionProperty(Property):
    """An append-only ordered sequence.

    Observers receive a tuple snapshot of the full contents on every
    append, and once on subscription (even when still empty).
    """

    kind = PropertyKind.COLLECTION

    def __init__(self, initial: Iterable[Any] = ()) -> None:
        super().__init__()
        self._items: list[Any] = list(initial)

    @property
    def value(self) -> tuple[Any, ...]:
        return tuple(self._items)

    @property
    def has_value(self) -> bool:
        return True

    def add(self, item: Any) -> None:
        self._items.append(item)
        logger.debug("%s appended %r (now %d items)", type(self).__name__, item, len(self._items))
        self._fire(self.value)

    def __len__(self) -> int:
        return len(self._items)

    def rendered(self) -> list[Any]:
        return [_render(item) for item in self._items]


class DerivedProperty(ScalarProperty):
    """A scalar recomputed synchronously from an upstream observable.

    Parameters
    ----------
    source:
        Any object with ``add_observer`` (a property or link relationship).
    transform:
        Pure function applied to every upstream value, including the one
        replayed at subscription time.
    """

    kind = PropertyKind.DERIVED

    def __init__(self, source: SupportsObservers, transform: Callable[[Any], Any]) -> None:
        super().__init__()
        self.source = source
        self._transform = transform
        source.add_observer(self._recompute)

    def _recompute(self, upstream: Any) -> None:
        self.set(self._transform(upstream))


class LinkRelationship(Property):
    """A set-once reference to another construct.

    Parameters
    ----------
    targets:
        Capability tags this relationship is satisfied by.  A resource
        that is linked against a node advertising any of them fills the
        relationship automatically.
    initial_value:
        Construct to link immediately.
    """

    kind = PropertyKind.LINK

    def __init__(self, targets: Iterable[str], initial_value: "Construct | None" = None) -> None:
        super().__init__()
        self.targets: tuple[str, ...] = tuple(targets)
        self._value: Any = UNSET
        self.change_trace: CreationTrace | None = None
        if initial_value is not None:
            self.set(initial_value)

    @property
    def value(self) -> "Construct | Any":
        return self._value

    def set(self, target: "Construct") -> None:
        """Store ``target`` and notify observers.

        Raises
        ------
        AlreadyLinkedError
            If the relationship already holds a construct.
        """
        if self._value is not UNSET:
            raise AlreadyLinkedError(str(self._value), str(target))
        self._value = target
        self.change_trace = CreationTrace.capture()
        logger.debug("LinkRelationship(%s) linked to %s", ",".join(self.targets), target)
        self._fire(target)

    def rendered(self) -> Any:
        if self._value is UNSET:
            return None
        return {"Ref": "".join(self._value.path)}

    def __repr__(self) -> str:
        return f"LinkRelationship({list(self.targets)!r}, {self._value!r})"


def expect_kind(prop: Property, kind: PropertyKind, subject: str) -> Property:
    """Return ``prop`` if it is of ``kind``.

    Raises
    ------
    TypeMismatchError
        If ``prop`` is a different variant.
    """
    if prop.kind is not kind:
        raise TypeMismatchError(subject, f"{kind.value} property", f"{prop.kind.value} property ({prop!r})")
    return prop
