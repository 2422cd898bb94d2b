"""Transformation search exports."""

from .edit_distance import edit_distance
from .path_candidate import PathCandidate
from .schema_searcher import SchemaSearcher, TransformSearchError, find_transform_path
from .transform_ops import (
    CastGround,
    DropProperty,
    EnterArray,
    EnterProperty,
    ExtractProperty,
    Leave,
    TransformOp,
    WrapProperty,
)

__all__ = [
    "CastGround",
    "DropProperty",
    "EnterArray",
    "EnterProperty",
    "ExtractProperty",
    "Leave",
    "PathCandidate",
    "SchemaSearcher",
    "TransformOp",
    "TransformSearchError",
    "WrapProperty",
    "edit_distance",
    "find_transform_path",
]
