"""Transformation operations produced by the schema searcher."""

from __future__ import annotations

from dataclasses import dataclass

from schema_transformer.schema_management.shape_models import Ground


@dataclass(frozen=True)
class CastGround:
    """Convert the focused scalar from one ground type to another."""

    source: Ground
    target: Ground


@dataclass(frozen=True)
class DropProperty:
    """Delete a property from the focused object."""

    name: str


@dataclass(frozen=True)
class EnterArray:
    """Focus on every item of the focused array until the matching ``Leave``."""


@dataclass(frozen=True)
class EnterProperty:
    """Focus on one property of the focused object until the matching ``Leave``."""

    name: str


@dataclass(frozen=True)
class WrapProperty:
    """Replace the focused value with a single-property object holding it."""

    name: str


@dataclass(frozen=True)
class ExtractProperty:
    """Replace the focused object with the value of one of its properties."""

    name: str


@dataclass(frozen=True)
class Leave:
    """Close the innermost ``EnterArray`` or ``EnterProperty``."""


TransformOp = (
    CastGround | DropProperty | EnterArray | EnterProperty | WrapProperty | ExtractProperty | Leave
)
