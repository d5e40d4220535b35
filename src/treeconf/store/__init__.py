"""treeconf value store module."""

from .memory import TreeStore
from .protocol import ValueStore

__all__ = [
    "TreeStore",
    "ValueStore",
]
