"""Schema catalog exports."""

from .catalog import list_bundled_schemas, load_bundled_schema, load_schema_file, resolve_schema

__all__ = [
    "list_bundled_schemas",
    "load_bundled_schema",
    "load_schema_file",
    "resolve_schema",
]
