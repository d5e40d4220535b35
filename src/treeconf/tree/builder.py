"""Construction of node trees from Section schemas."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, TypeVar

from treeconf.common import ROOT_PATH, KeyPath, create_logger
from treeconf.settings import TreeSettings
from treeconf.store import TreeStore, ValueStore

from .nodes import Leaf, Node, Section
from .schema import SchemaDefinitionError, schema_fields

logger = create_logger("tree")

S = TypeVar("S", bound=Section)


def create(
    schema: type[S],
    initial: MutableMapping[str, Any] | None = None,
    *,
    settings: TreeSettings | None = None,
) -> S:
    """Build the node tree for ``schema`` over ``initial``.

    ``initial`` becomes the live value tree: it is not copied and it is not
    checked against the schema. Every path in the schema gets exactly one
    handle; reads of keys missing from ``initial`` return ``None``.
    """
    store = TreeStore(initial, settings=settings)
    root = build_node(schema, store)
    logger.debug("Config tree created", schema=schema.__qualname__)
    return root


def build_node(schema: type[S], store: ValueStore, path: KeyPath = ROOT_PATH) -> S:
    if not (isinstance(schema, type) and issubclass(schema, Section)):
        raise SchemaDefinitionError(f"Schema must be a Section subclass, got {schema!r}")
    return _build_section(schema, store, path, ())


def _build_section(schema: type[S], store: ValueStore, path: KeyPath, lineage: tuple[type[Section], ...]) -> S:
    if schema in lineage:
        cycle = " -> ".join(cls.__qualname__ for cls in (*lineage, schema))
        raise SchemaDefinitionError(f"Recursive schema cannot be built eagerly: {cycle}")
    lineage = (*lineage, schema)

    children: dict[str, Node] = {}
    for field in schema_fields(schema):
        child_path = (*path, field.name)
        if field.is_leaf:
            children[field.name] = Leaf(store, child_path)
        else:
            assert field.section is not None
            children[field.name] = _build_section(field.section, store, child_path, lineage)

    return schema(store, path, children)
