"""Schema flattening and traversal service."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from .schema_models import FieldPath, SchemaField, SchemaNode

DESTINATION_ROOT = "x"
SOURCE_ROOT = "y"
DEFAULT_MAX_DEPTH = 32


class SchemaError(Exception):
    """Raised for schema loading, parsing or flattening failures."""


@dataclass(frozen=True)
class RecursionPolicy:
    """Decides which nested records are flattened instead of kept as leaves.

    ``local_namespaces=None`` treats every nested record as local.
    """

    local_namespaces: tuple[str, ...] | None = None
    max_depth: int = DEFAULT_MAX_DEPTH

    def should_descend(self, schema_field: SchemaField) -> bool:
        if schema_field.record is None:
            return False
        if schema_field.flatten is not None:
            return schema_field.flatten
        if self.local_namespaces is None:
            return True
        namespace = schema_field.record.namespace
        return any(
            namespace == local or namespace.startswith(f"{local}.")
            for local in self.local_namespaces
        )


class SchemaVisitor(Protocol):
    """Callbacks fired by :func:`walk_schema`."""

    def enter_record(self, schema_field: SchemaField | None, path: FieldPath) -> None: ...

    def visit_leaf(self, schema_field: SchemaField, path: FieldPath) -> None: ...

    def exit_record(self, schema_field: SchemaField | None, path: FieldPath) -> None: ...


class _LeafCollector:
    def __init__(self) -> None:
        self.paths: list[FieldPath] = []
        self._seen: set[FieldPath] = set()

    def enter_record(self, schema_field: SchemaField | None, path: FieldPath) -> None:
        return None

    def visit_leaf(self, schema_field: SchemaField, path: FieldPath) -> None:
        if path in self._seen:
            raise SchemaError(f"Duplicate flattened field detected: {path}")
        self._seen.add(path)
        self.paths.append(path)

    def exit_record(self, schema_field: SchemaField | None, path: FieldPath) -> None:
        return None


def flatten_schema(
    schema: SchemaNode,
    *,
    root: str = DESTINATION_ROOT,
    policy: RecursionPolicy | None = None,
) -> list[FieldPath]:
    """Return the leaf paths of ``schema`` in declaration order."""
    collector = _LeafCollector()
    walk_schema(schema, collector, root=root, policy=policy)
    return collector.paths


def walk_schema(
    schema: SchemaNode,
    visitor: SchemaVisitor,
    *,
    root: str = DESTINATION_ROOT,
    policy: RecursionPolicy | None = None,
) -> None:
    """Walk ``schema`` depth-first, reporting record boundaries and leaves."""
    resolved_policy = policy or RecursionPolicy()
    root_path = FieldPath(root=root, names=())
    visitor.enter_record(None, root_path)
    _walk_record(
        schema,
        visitor,
        prefix=root_path,
        policy=resolved_policy,
        stack=(schema.qualified_name,),
    )
    visitor.exit_record(None, root_path)


def _walk_record(
    node: SchemaNode,
    visitor: SchemaVisitor,
    *,
    prefix: FieldPath,
    policy: RecursionPolicy,
    stack: Sequence[str],
) -> None:
    for schema_field in node.fields:
        path = FieldPath(root=prefix.root, names=(*prefix.names, schema_field.name))
        if not policy.should_descend(schema_field):
            visitor.visit_leaf(schema_field, path)
            continue

        nested = schema_field.record
        assert nested is not None
        if nested.qualified_name in stack:
            cycle = " -> ".join((*stack, nested.qualified_name))
            raise SchemaError(f"Recursive record detected at {path}: {cycle}")
        if len(stack) >= policy.max_depth:
            raise SchemaError(f"Schema nesting exceeds max depth {policy.max_depth} at {path}")

        visitor.enter_record(schema_field, path)
        _walk_record(
            nested,
            visitor,
            prefix=path,
            policy=policy,
            stack=(*stack, nested.qualified_name),
        )
        visitor.exit_record(schema_field, path)
