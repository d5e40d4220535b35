"""Node handles: typed accessors bound to one path of a shared store."""

from __future__ import annotations

import sys
from collections.abc import Callable, Mapping
from contextlib import AbstractContextManager
from types import MappingProxyType
from typing import Any, ClassVar, Generic, NoReturn

from typing_extensions import TypeVar

from treeconf.common import KeyPath, Subscriber, Unsubscribe
from treeconf.store import ValueStore
from treeconf.utils import format_path

T = TypeVar("T")
V = TypeVar("V", bound=Mapping[str, Any], default=dict[str, Any])


class Node:
    """Base accessor. Holds a store reference and a path, never a value."""

    _store: ValueStore
    _path: KeyPath

    def __init__(self, store: ValueStore, path: KeyPath) -> None:
        object.__setattr__(self, "_store", store)
        object.__setattr__(self, "_path", path)

    @property
    def path(self) -> KeyPath:
        return self._path

    def get(self) -> Any:  # noqa: ANN401
        return self._store.get(self._path)

    def set(self, value: Any) -> None:  # noqa: ANN401
        self._store.set(self._path, value)

    def subscribe(self, callback: Subscriber) -> Unsubscribe:
        return self._store.subscribe(self._path, callback)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} handles are read-only; use set() to change '{name}'")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} handles are read-only")

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Node) and other._store is self._store and other._path == self._path

    def __hash__(self) -> int:
        return hash((id(self._store), self._path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({format_path(self._path, separator_of(self))!r})"


class Leaf(Node, Generic[T]):
    """Terminal field of value type ``T``."""

    def get(self) -> T | None:
        return self._store.get(self._path)

    def set(self, value: T) -> None:
        self._store.set(self._path, value)

    def subscribe(self, callback: Callable[[T | None], None]) -> Unsubscribe:
        return self._store.subscribe(self._path, callback)


class Section(Node, Generic[V]):
    """Base class for schema shapes.

    Subclasses declare their keys as annotations, either ``Leaf[T]`` or another
    ``Section`` subclass. The optional type argument is the value type seen by
    ``get``, ``set`` and ``subscribe``; a ``TypedDict`` with ``total=False``
    keeps those operations checked against the schema::

        class UserValues(TypedDict, total=False):
            name: str
            age: int

        class User(Section[UserValues]):
            name: Leaf[str]
            age: Leaf[int]

        class AppConfig(Section):
            user: User

    Instances are built by ``treeconf.create``; each annotated key becomes a
    child handle attribute.
    """

    _children: Mapping[str, Node]
    _parent_namespace: ClassVar[dict[str, Any] | None] = None

    def __init_subclass__(cls, **kwargs: Any) -> None:  # noqa: ANN401
        super().__init_subclass__(**kwargs)
        # Schemas declared inside a function reference their siblings through the enclosing locals.
        frame = sys._getframe(1)
        cls._parent_namespace = None if frame.f_locals is frame.f_globals else dict(frame.f_locals)

    def __init__(self, store: ValueStore, path: KeyPath, children: Mapping[str, Node]) -> None:
        super().__init__(store, path)
        for name, child in children.items():
            object.__setattr__(self, name, child)
        object.__setattr__(self, "_children", MappingProxyType(dict(children)))

    def get(self) -> V | None:
        return self._store.get(self._path)

    def set(self, value: V) -> None:
        """Replace the whole sub-tree at this path."""
        self._store.set(self._path, value)

    def merge(self, partial: Mapping[str, Any]) -> None:
        """Deep-merge ``partial`` into the sub-tree at this path.

        Nested mappings are merged, other values replaced and ``None`` values
        skipped. Subscribers are notified as for ``set``.
        """
        self._store.merge(self._path, partial)

    def subscribe(self, callback: Callable[[V | None], None]) -> Unsubscribe:
        return self._store.subscribe(self._path, callback)

    def children(self) -> Mapping[str, Node]:
        return self._children

    def batch(self) -> AbstractContextManager[None]:
        """Defer notifications for the whole tree until the block exits.

        Notifications are still sent when the block raises, then the
        exception propagates.
        """
        return self._store.batch()


def separator_of(node: Node) -> str:
    return node._store.settings.path_separator
