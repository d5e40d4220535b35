from __future__ import annotations

from typing import Any, ClassVar

import pytest

from treeconf import Leaf, Section, SchemaDefinitionError, create
from treeconf.settings import TreeSettings
from treeconf.store import TreeStore
from treeconf.tree import build_node, schema_fields


class Limits(Section):
    cpu: Leaf[float]
    memory: Leaf


class Worker(Section):
    name: Leaf[str]
    limits: Limits
    kind: ClassVar[str] = "worker"
    _internal: int


class Level4(Section):
    value: Leaf[int]


class Level3(Section):
    level4: Level4


class Level2(Section):
    level3: Level3


class Level1(Section):
    level2: Level2


class BaseService(Section):
    enabled: Leaf[bool]


class HttpService(BaseService):
    port: Leaf[int]


class PlainAnnotation(Section):
    name: str


class ReservedKey(Section):
    get: Leaf[str]  # type: ignore[assignment]


class Recursive(Section):
    parent: Recursive


class Unresolvable(Section):
    missing: DoesNotExist  # type: ignore[name-defined]  # noqa: F821


def test_schema_fields_classifies_leaves_and_sections() -> None:
    fields = schema_fields(Worker)

    assert [field.name for field in fields] == ["name", "limits"]
    assert fields[0].is_leaf
    assert fields[1].section is Limits


def test_schema_fields_skips_class_vars_and_private_names() -> None:
    names = {field.name for field in schema_fields(Worker)}

    assert "kind" not in names
    assert "_internal" not in names


def test_bare_leaf_annotation_is_a_leaf() -> None:
    assert [field.is_leaf for field in schema_fields(Limits)] == [True, True]


def test_inherited_keys_come_first() -> None:
    assert [field.name for field in schema_fields(HttpService)] == ["enabled", "port"]

    service = create(HttpService, {}, settings=TreeSettings())
    service.enabled.set(True)
    assert service.get() == {"enabled": True}


def test_deep_nesting_builds_every_level() -> None:
    cfg = create(Level1, {}, settings=TreeSettings())
    calls: list[Any] = []
    cfg.level2.subscribe(calls.append)

    cfg.level2.level3.level4.value.set(7)

    assert cfg.level2.level3.level4.value.path == ("level2", "level3", "level4", "value")
    assert cfg.get() == {"level2": {"level3": {"level4": {"value": 7}}}}
    assert calls == [{"level3": {"level4": {"value": 7}}}]


def test_build_node_binds_subtree_to_given_path() -> None:
    store = TreeStore({"workers": {"main": {"name": "alpha"}}}, settings=TreeSettings())

    worker = build_node(Worker, store, ("workers", "main"))

    assert worker.name.get() == "alpha"
    assert worker.limits.cpu.path == ("workers", "main", "limits", "cpu")


def test_plain_annotation_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError, match="expected Leaf"):
        create(PlainAnnotation, {})


def test_reserved_key_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError, match="reserved"):
        create(ReservedKey, {})


def test_recursive_schema_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError, match="Recursive schema"):
        create(Recursive, {})


def test_unresolvable_annotation_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError, match="Cannot resolve"):
        create(Unresolvable, {})


def test_non_section_schema_is_rejected() -> None:
    with pytest.raises(SchemaDefinitionError, match="Section subclass"):
        create(dict, {})  # type: ignore[type-var]


def test_schema_declared_inside_function_resolves_local_sections() -> None:
    class Inner(Section):
        value: Leaf[int]

    class Outer(Section):
        inner: Inner
        label: Leaf[str]

    cfg = create(Outer, {}, settings=TreeSettings())
    cfg.inner.value.set(7)

    assert [field.name for field in schema_fields(Outer)] == ["inner", "label"]
    assert cfg.inner.path == ("inner",)
    assert cfg.inner.value.get() == 7
    assert cfg.get() == {"inner": {"value": 7}}


def test_module_level_schema_resolves_from_globals() -> None:
    assert Limits._parent_namespace is None
