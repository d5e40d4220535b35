"""In-memory value store with path-based change notification."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from contextlib import contextmanager
from typing import Any

from treeconf.common import ROOT_PATH, KeyPath, Subscriber, Unsubscribe, create_logger
from treeconf.settings import TreeSettings, get_settings
from treeconf.utils import deep_merge, format_path

logger = create_logger("store")


class TreeStore:
    """Owner of the value tree and the subscriber registry.

    The root mapping passed in is adopted as the live tree, not copied. A
    mutation at path P notifies subscribers of P and of every ancestor of P,
    each receiving the current value at its own path. Subscribers of
    descendants of P are not notified.
    """

    def __init__(self, root: MutableMapping[str, Any] | None = None, *, settings: TreeSettings | None = None) -> None:
        self._root: Any = root if root is not None else {}
        self._settings = settings or get_settings()
        self._subscribers: dict[KeyPath, dict[int, Subscriber]] = {}
        self._tokens = itertools.count()
        self._batch_depth = 0
        self._pending: list[KeyPath] = []

    @property
    def settings(self) -> TreeSettings:
        return self._settings

    def get(self, path: KeyPath) -> Any:  # noqa: ANN401
        cursor = self._root
        for key in path:
            if not isinstance(cursor, Mapping):
                return None
            cursor = cursor.get(key)
        return cursor

    def set(self, path: KeyPath, value: Any) -> None:  # noqa: ANN401
        if path == ROOT_PATH:
            self._root = value
        else:
            self._container_for(path)[path[-1]] = value

        logger.trace("Value set", path=self._format(path))
        self._mutated(path)

    def merge(self, path: KeyPath, partial: Mapping[str, Any]) -> None:
        current = self.get(path)
        base = current if isinstance(current, Mapping) else {}
        logger.trace("Merging value", path=self._format(path), keys=sorted(partial))
        self.set(path, deep_merge(base, partial))

    def subscribe(self, path: KeyPath, callback: Subscriber) -> Unsubscribe:
        token = next(self._tokens)
        self._subscribers.setdefault(path, {})[token] = callback
        logger.debug("Subscriber registered", path=self._format(path), token=token)

        def unsubscribe() -> None:
            registry = self._subscribers.get(path)
            if registry is None or registry.pop(token, None) is None:
                return
            if not registry:
                del self._subscribers[path]
            logger.debug("Subscriber removed", path=self._format(path), token=token)

        return unsubscribe

    @contextmanager
    def batch(self) -> Iterator[None]:
        """Defer notifications until the outermost block exits.

        Mutations apply immediately. Notifications are sent on exit even when
        the block raises, so subscribers never miss an applied change.
        """
        self._batch_depth += 1
        try:
            yield
        finally:
            self._batch_depth -= 1
            if self._batch_depth == 0:
                pending, self._pending = self._pending, []
                if pending:
                    logger.debug("Flushing batch", mutations=len(pending))
                    self._notify(self._affected_paths(pending))

    def _container_for(self, path: KeyPath) -> MutableMapping[str, Any]:
        """Walk to the parent of the last key.

        Missing or scalar intermediates become empty dicts; read-only mappings
        are replaced by a mutable copy.
        """
        if not isinstance(self._root, MutableMapping):
            self._root = _writable(self._root)

        parent: MutableMapping[str, Any] = self._root
        for key in path[:-1]:
            child = parent.get(key)
            if not isinstance(child, MutableMapping):
                child = _writable(child)
                parent[key] = child
            parent = child
        return parent

    def _mutated(self, path: KeyPath) -> None:
        if self._batch_depth:
            self._pending.append(path)
            return
        self._notify(self._affected_paths([path]))

    def _affected_paths(self, mutated: Iterable[KeyPath]) -> list[KeyPath]:
        """Subscribed paths equal to or above any mutated path, deepest first, without duplicates."""
        affected: dict[KeyPath, None] = {}
        for path in mutated:
            for depth in range(len(path), -1, -1):
                prefix = path[:depth]
                if prefix in self._subscribers:
                    affected.setdefault(prefix)
        return list(affected)

    def _notify(self, paths: list[KeyPath]) -> None:
        # Targets are fixed before the first callback runs.
        targets = [
            (path, token, callback) for path in paths for token, callback in self._subscribers.get(path, {}).items()
        ]

        for path, token, callback in targets:
            if token not in self._subscribers.get(path, {}):
                continue
            self._invoke(path, callback)

    def _invoke(self, path: KeyPath, callback: Subscriber) -> None:
        try:
            callback(self.get(path))
        except Exception:
            if self._settings.callback_errors == "raise":
                raise
            logger.exception("Subscriber callback failed", path=self._format(path))

    def _format(self, path: KeyPath) -> str:
        return format_path(path, self._settings.path_separator)


def _writable(value: object) -> dict[str, Any]:
    return dict(value) if isinstance(value, Mapping) else {}
