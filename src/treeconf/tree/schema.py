"""Schema inspection for Section subclasses."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache
from typing import ClassVar, get_origin, get_type_hints

from .nodes import Leaf, Section

RESERVED_KEYS = frozenset(name for name in dir(Section) if not name.startswith("_"))


class SchemaDefinitionError(TypeError):
    """A schema class cannot be turned into a node tree."""


@dataclass(frozen=True)
class SchemaField:
    name: str
    section: type[Section] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.section is None


@cache
def schema_fields(schema: type[Section]) -> tuple[SchemaField, ...]:
    """Return the keys declared by ``schema`` in declaration order, base classes first."""
    try:
        hints = get_type_hints(schema, localns=schema._parent_namespace)
    except NameError as exc:
        raise SchemaDefinitionError(f"Cannot resolve annotations of {schema.__qualname__}: {exc}") from exc

    fields: list[SchemaField] = []
    for name, hint in hints.items():
        if name.startswith("_") or get_origin(hint) is ClassVar:
            continue
        if name in RESERVED_KEYS:
            raise SchemaDefinitionError(f"{schema.__qualname__}.{name}: '{name}' is reserved by Section")

        if hint is Leaf or get_origin(hint) is Leaf:
            fields.append(SchemaField(name=name))
        elif isinstance(hint, type) and issubclass(hint, Section):
            fields.append(SchemaField(name=name, section=hint))
        else:
            raise SchemaDefinitionError(
                f"{schema.__qualname__}.{name}: expected Leaf[...] or a Section subclass, got {hint!r}"
            )

    return tuple(fields)
