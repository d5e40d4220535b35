"""Typed node trees over a shared value store."""

from .builder import build_node, create
from .lookup import node_at
from .models import UnknownPathError
from .nodes import Leaf, Node, Section
from .schema import SchemaDefinitionError, SchemaField, schema_fields

__all__ = [
    "Leaf",
    "Node",
    "SchemaDefinitionError",
    "SchemaField",
    "Section",
    "UnknownPathError",
    "build_node",
    "create",
    "node_at",
    "schema_fields",
]
