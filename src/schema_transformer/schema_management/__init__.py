"""Schema management exports."""

from .schema_models import FlattenedField, SchemaDocument
from .schema_projection import (
    SchemaError,
    collect_patterns,
    flatten_schema,
    iter_object_nodes,
    load_schema_document,
    open_object_paths,
    required_properties,
)
from .shape_models import (
    AnyShape,
    ArrayShape,
    Ground,
    GroundShape,
    NeverShape,
    ObjectShape,
    Shape,
    describe_shape,
    parse_shape,
)

__all__ = [
    "AnyShape",
    "ArrayShape",
    "FlattenedField",
    "Ground",
    "GroundShape",
    "NeverShape",
    "ObjectShape",
    "SchemaDocument",
    "SchemaError",
    "Shape",
    "collect_patterns",
    "describe_shape",
    "flatten_schema",
    "iter_object_nodes",
    "load_schema_document",
    "open_object_paths",
    "parse_shape",
    "required_properties",
]
