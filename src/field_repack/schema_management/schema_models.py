"""Schema management entities."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SchemaNode:
    """Record type with its ordered child fields."""

    name: str
    namespace: str = ""
    fields: tuple[SchemaField, ...] = ()

    @property
    def qualified_name(self) -> str:
        return f"{self.namespace}.{self.name}" if self.namespace else self.name


@dataclass(frozen=True)
class SchemaField:
    """One declared field of a record.

    ``record`` is set when the field's type (after one level of optional or
    reference indirection) is itself a record. ``flatten`` overrides the
    namespace-based classification when not ``None``.
    """

    name: str
    type_name: str
    namespace: str = ""
    optional: bool = False
    record: SchemaNode | None = field(default=None, compare=False, repr=False)
    flatten: bool | None = None

    @property
    def is_record(self) -> bool:
        return self.record is not None


@dataclass(frozen=True)
class FieldPath:
    """Immutable path from a schema root to one leaf."""

    root: str
    names: tuple[str, ...]

    @property
    def leaf_name(self) -> str:
        return self.names[-1] if self.names else ""

    def __str__(self) -> str:
        return ".".join((self.root, *self.names))
