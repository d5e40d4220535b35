"""Value store protocol."""

from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any, Protocol

from treeconf.common import KeyPath, Subscriber, Unsubscribe
from treeconf.settings import TreeSettings


class ValueStore(Protocol):
    """Protocol for the shared value tree every node handle reads and writes through."""

    @property
    def settings(self) -> TreeSettings: ...

    def get(self, path: KeyPath) -> Any:  # noqa: ANN401
        """Return the live value at ``path``, or ``None`` when any key on the way is missing."""
        ...

    def set(self, path: KeyPath, value: Any) -> None:  # noqa: ANN401
        """Replace the value at ``path`` and notify the path and its ancestors."""
        ...

    def merge(self, path: KeyPath, partial: Mapping[str, Any]) -> None:
        """Deep-merge ``partial`` into the mapping at ``path`` and notify like ``set``."""
        ...

    def subscribe(self, path: KeyPath, callback: Subscriber) -> Unsubscribe:
        """Register ``callback`` for ``path``.

        Returns:
            A function removing exactly this registration. Calling it again is a no-op.
        """
        ...

    def batch(self) -> AbstractContextManager[None]:
        """Defer notifications until the outermost batch block exits."""
        ...
