"""Common types shared by the store and the node tree."""

from collections.abc import Callable
from typing import Any, TypeAlias

KeyPath: TypeAlias = tuple[str, ...]
Subscriber: TypeAlias = Callable[[Any], None]
Unsubscribe: TypeAlias = Callable[[], None]

ROOT_PATH: KeyPath = ()
