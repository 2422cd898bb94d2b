"""Schema inspection, record checking and schema-to-schema transformer generation."""

from schema_transformer.code_generation import JavaScriptCodegen
from schema_transformer.record_checking import check_record
from schema_transformer.schema_catalog import load_bundled_schema, resolve_schema
from schema_transformer.schema_management import flatten_schema, parse_shape
from schema_transformer.transform_search import edit_distance, find_transform_path

__all__ = [
    "JavaScriptCodegen",
    "check_record",
    "edit_distance",
    "find_transform_path",
    "flatten_schema",
    "load_bundled_schema",
    "parse_shape",
    "resolve_schema",
]
