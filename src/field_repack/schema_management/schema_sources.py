"""Schema introspection boundary: locator parsing and schema providers."""

from __future__ import annotations

import dataclasses
import importlib
import logging
import types
import typing
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol

import yaml

from .schema_models import SchemaField, SchemaNode
from .schema_walker import SchemaError

logger = logging.getLogger(__name__)

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")
_INDIRECTION_MARKERS = ("?", "*")


class LocatorError(SchemaError):
    """Raised when a type locator is not of the form ``<locator>#<TypeName>``."""


class SchemaLoadError(SchemaError):
    """Raised when a schema provider cannot resolve a locator."""


@dataclass(frozen=True)
class TypeLocator:
    """Reference to one record type: where to find it and its name."""

    location: str
    type_name: str

    def __str__(self) -> str:
        return f"{self.location}#{self.type_name}"


class SchemaProvider(Protocol):
    """Resolves a locator into a schema tree."""

    def load(self, locator: TypeLocator) -> SchemaNode: ...


def parse_type_locator(text: str) -> TypeLocator:
    """Split ``<locator>#<TypeName>``; exactly one ``#`` is allowed."""
    tokens = text.split("#")
    if len(tokens) != 2:
        raise LocatorError(f"invalid format {text!r}")
    location, type_name = (token.strip() for token in tokens)
    if not location or not type_name:
        raise LocatorError(f"invalid format {text!r}")
    return TypeLocator(location=location, type_name=type_name)


def load_schema(locator_text: str, *, base_path: Path | None = None) -> SchemaNode:
    """Parse ``locator_text`` and resolve it with the matching provider."""
    locator = parse_type_locator(locator_text)
    provider = select_provider(locator, base_path=base_path)
    logger.debug("Loading %s with %s", locator, type(provider).__name__)
    try:
        return provider.load(locator)
    except SchemaLoadError:
        raise
    except (
        SchemaError,
        OSError,
        ImportError,
        SyntaxError,
        ValueError,
        yaml.YAMLError,
        TypeError,
        NameError,
    ) as exc:
        raise SchemaLoadError(f"failed to load {locator}: {exc}") from exc


def select_provider(locator: TypeLocator, *, base_path: Path | None = None) -> SchemaProvider:
    if locator.location.lower().endswith(DOCUMENT_SUFFIXES):
        return DocumentSchemaProvider(base_path=base_path)
    return DataclassSchemaProvider()


class DocumentSchemaProvider:
    """Reads record types declared in a YAML or JSON document.

    Document layout::

        namespace: app.persistence
        types:
          UserRow:
            fields:
              - {name: ID, type: int}
              - {name: Profile, type: "*ProfileRow"}
          ProfileRow:
            namespace: app.persistence.profile
            fields:
              - {name: Name, type: str}

    A field type naming another entry of ``types`` is a nested record. One
    leading ``?`` or ``*`` marks optional/reference indirection.
    """

    def __init__(self, base_path: Path | None = None) -> None:
        self._base_path = base_path

    def load(self, locator: TypeLocator) -> SchemaNode:
        path = Path(locator.location)
        if not path.is_absolute() and self._base_path is not None:
            path = self._base_path / path
        if not path.exists():
            raise SchemaLoadError(f"Schema document not found: {path}")

        parsed = yaml.safe_load(path.read_text(encoding="utf-8"))
        if not isinstance(parsed, Mapping):
            raise SchemaError(f"Schema document root must be a mapping: {path}")
        declared = parsed.get("types")
        if not isinstance(declared, Mapping) or not declared:
            raise SchemaError(f"Schema document must declare types: {path}")
        default_namespace = parsed.get("namespace") or ""
        if not isinstance(default_namespace, str):
            raise SchemaError("Schema document namespace must be a string.")

        builder = _DocumentTreeBuilder(declared, default_namespace)
        return builder.build(locator.type_name)


class _DocumentTreeBuilder:
    def __init__(self, declared: Mapping[str, Any], default_namespace: str) -> None:
        self._declared = declared
        self._default_namespace = default_namespace
        self._building: list[str] = []

    def build(self, type_name: str) -> SchemaNode:
        definition = self._declared.get(type_name)
        if definition is None:
            raise SchemaLoadError(f"Type {type_name!r} is not declared in the schema document.")
        if not isinstance(definition, Mapping):
            raise SchemaError(f"Type {type_name!r} must be a mapping.")
        if type_name in self._building:
            # Recursive reference: keep the type but stop expanding it here;
            # the walker reports the cycle if it decides to descend.
            return SchemaNode(name=type_name, namespace=self._namespace_of(definition))

        self._building.append(type_name)
        try:
            raw_fields = definition.get("fields") or []
            if not isinstance(raw_fields, Sequence) or isinstance(raw_fields, str):
                raise SchemaError(f"Type {type_name!r} fields must be a list.")
            fields = tuple(self._build_field(type_name, raw) for raw in raw_fields)
        finally:
            self._building.pop()
        return SchemaNode(
            name=type_name, namespace=self._namespace_of(definition), fields=fields
        )

    def _build_field(self, owner: str, raw: Any) -> SchemaField:
        if not isinstance(raw, Mapping) or not isinstance(raw.get("name"), str):
            raise SchemaError(f"Fields of {owner!r} must be mappings with a name.")
        raw_type = raw.get("type")
        if not isinstance(raw_type, str) or not raw_type.strip():
            raise SchemaError(f"Field {owner}.{raw['name']} requires a type.")
        type_ref = raw_type.strip()
        optional = type_ref[0] in _INDIRECTION_MARKERS
        if optional:
            type_ref = type_ref[1:]

        flatten = raw.get("flatten")
        if flatten is not None and not isinstance(flatten, bool):
            raise SchemaError(f"Field {owner}.{raw['name']} flatten must be a boolean.")

        if type_ref in self._declared:
            nested = self.build(type_ref)
            return SchemaField(
                name=raw["name"],
                type_name=nested.name,
                namespace=nested.namespace,
                optional=optional,
                record=nested,
                flatten=flatten,
            )
        namespace, _, short_name = type_ref.rpartition(".")
        return SchemaField(
            name=raw["name"],
            type_name=short_name,
            namespace=namespace,
            optional=optional,
            flatten=flatten,
        )

    def _namespace_of(self, definition: Mapping[str, Any]) -> str:
        namespace = definition.get("namespace", self._default_namespace)
        if not isinstance(namespace, str):
            raise SchemaError("Type namespace must be a string.")
        return namespace


class DataclassSchemaProvider:
    """Reflects over dataclasses importable as ``package.module#ClassName``."""

    def load(self, locator: TypeLocator) -> SchemaNode:
        module = importlib.import_module(locator.location)
        target = getattr(module, locator.type_name, None)
        if target is None:
            raise SchemaLoadError(f"{locator.location} has no attribute {locator.type_name!r}")
        if not dataclasses.is_dataclass(target) or not isinstance(target, type):
            raise SchemaLoadError(f"{locator} is not a dataclass type")
        return _dataclass_node(target, building=())


def _dataclass_node(cls: type, *, building: tuple[type, ...]) -> SchemaNode:
    if cls in building:
        return SchemaNode(name=cls.__name__, namespace=cls.__module__)
    hints = typing.get_type_hints(cls)
    fields = []
    for dataclass_field in dataclasses.fields(cls):
        annotation, optional = _strip_optional(hints.get(dataclass_field.name, Any))
        if dataclasses.is_dataclass(annotation) and isinstance(annotation, type):
            nested = _dataclass_node(annotation, building=(*building, cls))
            fields.append(
                SchemaField(
                    name=dataclass_field.name,
                    type_name=annotation.__name__,
                    namespace=annotation.__module__,
                    optional=optional,
                    record=nested,
                    flatten=dataclass_field.metadata.get("flatten"),
                )
            )
            continue
        fields.append(
            SchemaField(
                name=dataclass_field.name,
                type_name=_short_type_name(annotation),
                namespace=getattr(annotation, "__module__", "") or "",
                optional=optional,
            )
        )
    return SchemaNode(name=cls.__name__, namespace=cls.__module__, fields=tuple(fields))


def _strip_optional(annotation: Any) -> tuple[Any, bool]:
    origin = typing.get_origin(annotation)
    if origin is typing.Union or origin is types.UnionType:
        members = [arg for arg in typing.get_args(annotation) if arg is not type(None)]
        if len(members) == 1:
            return members[0], True
    return annotation, False


def _short_type_name(annotation: Any) -> str:
    if annotation is Any:
        return "Any"
    name = getattr(annotation, "__name__", None)
    if isinstance(name, str) and typing.get_origin(annotation) is None:
        return name
    return repr(annotation).replace("typing.", "")
