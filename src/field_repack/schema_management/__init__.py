"""Schema management exports."""

from .schema_models import FieldPath, SchemaField, SchemaNode
from .schema_sources import (
    DataclassSchemaProvider,
    DocumentSchemaProvider,
    LocatorError,
    SchemaLoadError,
    TypeLocator,
    load_schema,
    parse_type_locator,
)
from .schema_walker import (
    DESTINATION_ROOT,
    SOURCE_ROOT,
    RecursionPolicy,
    SchemaError,
    flatten_schema,
    walk_schema,
)

__all__ = [
    "DESTINATION_ROOT",
    "SOURCE_ROOT",
    "DataclassSchemaProvider",
    "DocumentSchemaProvider",
    "FieldPath",
    "LocatorError",
    "RecursionPolicy",
    "SchemaError",
    "SchemaField",
    "SchemaLoadError",
    "SchemaNode",
    "TypeLocator",
    "flatten_schema",
    "load_schema",
    "parse_type_locator",
    "walk_schema",
]
