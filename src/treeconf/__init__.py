"""treeconf - typed, recursively navigable configuration trees.

By default, treeconf's internal logging is disabled when used as a library.
Library users can enable logging by calling treeconf.enable_logging().
"""

from treeconf.common import disable_library_logging, enable_library_logging

from .settings import TreeSettings, get_settings
from .store import TreeStore, ValueStore
from .tree import Leaf, Node, SchemaDefinitionError, Section, UnknownPathError, create, node_at

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "Leaf",
    "Node",
    "SchemaDefinitionError",
    "Section",
    "TreeSettings",
    "TreeStore",
    "UnknownPathError",
    "ValueStore",
    "create",
    "enable_logging",
    "get_settings",
    "node_at",
]
