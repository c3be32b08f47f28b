"""Option schema loading and lookups."""

from ghosttyconf.schema.loader import (
    SchemaHandle,
    SchemaLoader,
    SchemaLoadError,
    bundled_schema_path,
    is_repeatable_key,
    load_schema,
    load_schema_from_path,
    lookup,
    read_schema,
    reset_default_schema,
)

__all__ = [
    "SchemaHandle",
    "SchemaLoadError",
    "SchemaLoader",
    "bundled_schema_path",
    "is_repeatable_key",
    "load_schema",
    "load_schema_from_path",
    "lookup",
    "read_schema",
    "reset_default_schema",
]
