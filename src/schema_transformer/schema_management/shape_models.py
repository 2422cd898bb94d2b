"""Structural shape model of JSON schemas.

A shape keeps only the type structure of a schema: ground types, array items
and object properties. Value constraints such as ``pattern`` or ``minimum``
are ignored, so two schemas that differ only in constraints share a shape.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from .schema_projection import SchemaError


class Ground(str, Enum):
    """Scalar JSON schema types."""

    NUMBER = "number"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"
    NULL = "null"


@dataclass(frozen=True)
class GroundShape:
    """Matches a single scalar type."""

    ground: Ground


@dataclass(frozen=True)
class ArrayShape:
    """Matches arrays whose items all match ``items``."""

    items: Shape


@dataclass(frozen=True)
class ObjectShape:
    """Matches objects with the given properties, sorted by name."""

    properties: tuple[tuple[str, Shape], ...]

    @classmethod
    def of(cls, properties: Mapping[str, Shape]) -> ObjectShape:
        return cls(tuple(sorted(properties.items(), key=lambda item: item[0])))

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name, _ in self.properties)

    def get(self, name: str) -> Shape | None:
        for property_name, shape in self.properties:
            if property_name == name:
                return shape
        return None


@dataclass(frozen=True)
class AnyShape:
    """The ``true`` schema; matches every value."""


@dataclass(frozen=True)
class NeverShape:
    """The ``false`` schema; matches no value."""


Shape = GroundShape | ArrayShape | ObjectShape | AnyShape | NeverShape


def parse_shape(node: Any) -> Shape:
    """Reduce a JSON schema node to its shape.

    Raises:
      SchemaError: If the node has no usable ``type``, an array lacks ``items``
        or an object lacks ``properties``.
    """
    if isinstance(node, bool):
        return AnyShape() if node else NeverShape()
    if not isinstance(node, Mapping):
        raise SchemaError("Unsupported schema node: expected an object or a boolean.")

    type_name = node.get("type")
    if not isinstance(type_name, str):
        raise SchemaError("Unsupported schema node: 'type' must be a single type name.")

    if type_name == "array":
        if "items" not in node:
            raise SchemaError("Array schema requires items.")
        return ArrayShape(parse_shape(node["items"]))

    if type_name == "object":
        properties = node.get("properties")
        if not isinstance(properties, Mapping):
            raise SchemaError("Object schema requires properties.")
        return ObjectShape.of({name: parse_shape(child) for name, child in properties.items()})

    try:
        return GroundShape(Ground(type_name))
    except ValueError as exc:
        raise SchemaError(f"Unsupported schema type: {type_name}") from exc


def describe_shape(shape: Shape) -> str:
    """Render a compact, single-line description of a shape."""
    if isinstance(shape, GroundShape):
        return shape.ground.value
    if isinstance(shape, ArrayShape):
        return f"[{describe_shape(shape.items)}]"
    if isinstance(shape, ObjectShape):
        inner = ", ".join(f"{name}: {describe_shape(child)}" for name, child in shape.properties)
        return f"{{{inner}}}"
    if isinstance(shape, AnyShape):
        return "any"
    return "never"
