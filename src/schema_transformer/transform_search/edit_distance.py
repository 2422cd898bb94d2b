"""Structural edit distance between schema shapes."""

from __future__ import annotations

import math

from schema_transformer.schema_management.shape_models import (
    AnyShape,
    ArrayShape,
    GroundShape,
    NeverShape,
    ObjectShape,
    Shape,
)


def edit_distance(lhs: Shape, rhs: Shape) -> float:
    """Count the ground changes, additions and removals separating two shapes.

    Returns ``math.inf`` when the shapes are of different kinds or one of them
    is the ``false`` schema.
    """
    if lhs == rhs:
        return 0
    if isinstance(lhs, AnyShape) or isinstance(rhs, AnyShape):
        return 0
    if isinstance(lhs, NeverShape) or isinstance(rhs, NeverShape):
        return math.inf
    if isinstance(lhs, GroundShape) and isinstance(rhs, GroundShape):
        return 1
    if isinstance(lhs, ArrayShape) and isinstance(rhs, ArrayShape):
        return edit_distance(lhs.items, rhs.items)
    if isinstance(lhs, ObjectShape) and isinstance(rhs, ObjectShape):
        distance: float = 0
        for name in sorted(set(lhs.names) | set(rhs.names)):
            left = lhs.get(name)
            right = rhs.get(name)
            if left is None or right is None:
                distance += 1
            else:
                distance += edit_distance(left, right)
        return distance
    return math.inf
