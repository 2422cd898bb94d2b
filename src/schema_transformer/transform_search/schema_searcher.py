"""Search for a sequence of operations converting one schema shape into another."""

from __future__ import annotations

import logging

from schema_transformer.schema_management.shape_models import (
    AnyShape,
    ArrayShape,
    Ground,
    GroundShape,
    NeverShape,
    ObjectShape,
    Shape,
    describe_shape,
)

from .path_candidate import PathCandidate
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

_LOGGER = logging.getLogger(__name__)


class TransformSearchError(Exception):
    """Raised when no transformation path exists between two shapes."""


class SchemaSearcher:
    """Depth-first searcher building one transformation path per ``find_path`` call."""

    def __init__(self) -> None:
        self._candidate: PathCandidate[TransformOp] = PathCandidate()

    def find_path(self, source: Shape, target: Shape) -> list[TransformOp]:
        self._candidate = PathCandidate()
        with self._candidate.transaction():
            self._search(source, target)
        return self._candidate.finalize()

    def _search(self, source: Shape, target: Shape) -> None:
        if source == target:
            return
        if isinstance(source, AnyShape) or isinstance(target, AnyShape):
            return
        if isinstance(source, NeverShape) or isinstance(target, NeverShape):
            raise TransformSearchError("The false schema admits no transformation.")

        if isinstance(source, GroundShape) and isinstance(target, GroundShape):
            self._cast(source.ground, target.ground)
        elif isinstance(source, ArrayShape) and isinstance(target, ArrayShape):
            self._convert_items(source, target)
        elif isinstance(source, ObjectShape) and isinstance(target, ObjectShape):
            self._convert_properties(source, target)
        elif isinstance(source, ObjectShape):
            self._extract(source, target)
        elif isinstance(target, ObjectShape) and len(target.properties) == 1:
            self._wrap(source, target)
        else:
            raise TransformSearchError(
                f"No transformation from {describe_shape(source)} to {describe_shape(target)}."
            )

    def _cast(self, source: Ground, target: Ground) -> None:
        if source is Ground.INTEGER and target is Ground.NUMBER:
            return
        self._candidate.push(CastGround(source, target))

    def _convert_items(self, source: ArrayShape, target: ArrayShape) -> None:
        with self._candidate.transaction():
            self._search_nested(EnterArray(), source.items, target.items)

    def _convert_properties(self, source: ObjectShape, target: ObjectShape) -> None:
        missing = [name for name in target.names if source.get(name) is None]
        if missing:
            raise TransformSearchError(
                f"Source object has no property for target field(s): {', '.join(missing)}."
            )

        with self._candidate.transaction():
            for name, source_child in source.properties:
                target_child = target.get(name)
                if target_child is None:
                    _LOGGER.debug("Dropping property %s", name)
                    self._candidate.push(DropProperty(name))
                elif target_child != source_child:
                    self._search_nested(EnterProperty(name), source_child, target_child)

    def _extract(self, source: ObjectShape, target: Shape) -> None:
        for name, child in source.properties:
            if child == target:
                _LOGGER.debug("Extracting property %s", name)
                self._candidate.push(ExtractProperty(name))
                return
        raise TransformSearchError(
            f"Source object has no property of shape {describe_shape(target)} to extract."
        )

    def _wrap(self, source: Shape, target: ObjectShape) -> None:
        name, child = target.properties[0]
        with self._candidate.transaction():
            _LOGGER.debug("Wrapping value into property %s", name)
            self._candidate.push(WrapProperty(name))
            self._search_nested(EnterProperty(name), source, child)

    def _search_nested(
        self, enter: EnterArray | EnterProperty, source: Shape, target: Shape
    ) -> None:
        start = len(self._candidate)
        self._candidate.push(enter)
        self._search(source, target)
        if len(self._candidate) == start + 1:
            # Nothing to convert inside; drop the empty enter/leave pair.
            self._candidate.rollback_to(start)
        else:
            self._candidate.push(Leave())


def find_transform_path(source: Shape, target: Shape) -> list[TransformOp]:
    """Return the operations converting data of ``source`` shape to ``target`` shape.

    Raises:
      TransformSearchError: If the shapes cannot be bridged.
    """
    path = SchemaSearcher().find_path(source, target)
    _LOGGER.debug("Found transformation path with %d operation(s)", len(path))
    return path
