"""Runtime lookup of node handles by path."""

from __future__ import annotations

from collections.abc import Sequence

from result import Err, Ok, Result

from treeconf.common import create_logger
from treeconf.utils import format_path, to_key_path

from .models import UnknownPathError
from .nodes import Node, Section, separator_of

logger = create_logger("tree")


def node_at(root: Node, path: str | Sequence[str]) -> Result[Node, UnknownPathError]:
    """Resolve ``path`` relative to ``root``.

    String paths use the tree's separator (``"user.name"``); an empty path
    resolves to ``root`` itself.
    """
    separator = separator_of(root)
    keys = to_key_path(path, separator)

    node = root
    for depth, key in enumerate(keys):
        child = node.children().get(key) if isinstance(node, Section) else None
        if child is None:
            parent = format_path((*root.path, *keys[:depth]), separator)
            full_path = format_path((*root.path, *keys), separator)
            logger.debug("Unknown path", path=full_path, key=key)
            return Err(
                UnknownPathError(
                    path=full_path,
                    key=key,
                    message=f"'{parent or '<root>'}' has no key '{key}'",
                )
            )
        node = child

    return Ok(node)
