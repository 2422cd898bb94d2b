"""Schema searcher tests."""

from __future__ import annotations

import pytest
from schema_transformer.schema_catalog import load_bundled_schema
from schema_transformer.schema_management.shape_models import (
    AnyShape,
    ArrayShape,
    Ground,
    GroundShape,
    NeverShape,
    ObjectShape,
    parse_shape,
)
from schema_transformer.transform_search.schema_searcher import (
    SchemaSearcher,
    TransformSearchError,
    find_transform_path,
)
from schema_transformer.transform_search.transform_ops import (
    CastGround,
    DropProperty,
    EnterArray,
    EnterProperty,
    ExtractProperty,
    Leave,
    WrapProperty,
)

NUMBER = GroundShape(Ground.NUMBER)
INTEGER = GroundShape(Ground.INTEGER)
STRING = GroundShape(Ground.STRING)
BOOLEAN = GroundShape(Ground.BOOLEAN)


def _object(**properties: object) -> ObjectShape:
    return ObjectShape.of(properties)  # type: ignore[arg-type]


def test_equal_shapes_need_no_operations() -> None:
    shape = parse_shape(load_bundled_schema("advanced1").root)

    assert find_transform_path(shape, shape) == []


def test_ground_conversion_casts() -> None:
    assert find_transform_path(STRING, NUMBER) == [CastGround(Ground.STRING, Ground.NUMBER)]


def test_integer_widens_to_number_without_operations() -> None:
    assert find_transform_path(INTEGER, NUMBER) == []
    assert find_transform_path(NUMBER, INTEGER) == [CastGround(Ground.NUMBER, Ground.INTEGER)]


def test_trivial_schemas() -> None:
    assert find_transform_path(AnyShape(), STRING) == []
    assert find_transform_path(STRING, AnyShape()) == []
    with pytest.raises(TransformSearchError, match="false schema"):
        find_transform_path(NeverShape(), STRING)


def test_array_items_are_converted_inside_enter_and_leave() -> None:
    path = find_transform_path(ArrayShape(STRING), ArrayShape(NUMBER))

    assert path == [EnterArray(), CastGround(Ground.STRING, Ground.NUMBER), Leave()]


def test_objects_drop_extra_properties_and_convert_shared_ones() -> None:
    source = _object(age=STRING, name=STRING, nickname=STRING)
    target = _object(age=NUMBER, name=STRING)

    path = find_transform_path(source, target)

    assert path == [
        EnterProperty("age"),
        CastGround(Ground.STRING, Ground.NUMBER),
        Leave(),
        DropProperty("nickname"),
    ]


def test_missing_target_property_has_no_path() -> None:
    with pytest.raises(TransformSearchError, match="target field\\(s\\): email"):
        find_transform_path(_object(name=STRING), _object(name=STRING, email=STRING))


def test_object_to_scalar_extracts_first_matching_property() -> None:
    source = _object(zip=STRING, count=NUMBER, city=STRING)

    assert find_transform_path(source, STRING) == [ExtractProperty("city")]
    assert find_transform_path(source, NUMBER) == [ExtractProperty("count")]
    with pytest.raises(TransformSearchError, match="no property of shape boolean"):
        find_transform_path(source, BOOLEAN)


def test_scalar_is_wrapped_into_single_property_object() -> None:
    assert find_transform_path(STRING, _object(value=STRING)) == [WrapProperty("value")]
    assert find_transform_path(STRING, _object(value=NUMBER)) == [
        WrapProperty("value"),
        EnterProperty("value"),
        CastGround(Ground.STRING, Ground.NUMBER),
        Leave(),
    ]


def test_array_and_scalar_cannot_be_bridged() -> None:
    with pytest.raises(TransformSearchError, match="No transformation from \\[string\\] to string"):
        find_transform_path(ArrayShape(STRING), STRING)


def test_failure_deep_inside_an_object_leaves_no_partial_path() -> None:
    source = _object(items=ArrayShape(STRING), name=STRING)
    target = _object(items=ArrayShape(BOOLEAN), name=ArrayShape(STRING))

    with pytest.raises(TransformSearchError):
        find_transform_path(source, target)


def test_split_schema_reduces_to_person_subset() -> None:
    split = parse_shape(load_bundled_schema("advanced1-split").root)
    person = parse_shape(load_bundled_schema("advanced1").root)
    assert isinstance(split, ObjectShape)
    assert isinstance(person, ObjectShape)
    target = ObjectShape.of(
        {
            "age": NUMBER,
            "email": STRING,
            "homeAddress": person.get("address"),  # type: ignore[dict-item]
        }
    )

    path = find_transform_path(split, target)

    assert path == [
        DropProperty("firstName"),
        DropProperty("homePhone"),
        DropProperty("lastName"),
        DropProperty("workAddress"),
        DropProperty("workPhone"),
    ]


def test_person_schema_cannot_become_split_schema() -> None:
    person = parse_shape(load_bundled_schema("advanced1").root)
    split = parse_shape(load_bundled_schema("advanced1-split").root)

    with pytest.raises(TransformSearchError, match="firstName"):
        find_transform_path(person, split)


def test_searcher_instance_can_be_reused_for_independent_searches() -> None:
    searcher = SchemaSearcher()

    assert searcher.find_path(STRING, NUMBER) == [CastGround(Ground.STRING, Ground.NUMBER)]
    assert searcher.find_path(NUMBER, BOOLEAN) == [CastGround(Ground.NUMBER, Ground.BOOLEAN)]


def test_searcher_reused_after_failure_starts_from_an_empty_path() -> None:
    searcher = SchemaSearcher()

    with pytest.raises(TransformSearchError):
        searcher.find_path(ArrayShape(STRING), STRING)

    assert searcher.find_path(STRING, _object(value=STRING)) == [WrapProperty("value")]


def test_failed_sibling_search_keeps_previously_committed_operations() -> None:
    searcher = SchemaSearcher()
    candidate = searcher._candidate

    with candidate.transaction():
        searcher._search(STRING, NUMBER)
    with pytest.raises(TransformSearchError):
        with candidate.transaction():
            searcher._search(
                _object(a=STRING, b=STRING), _object(a=NUMBER, b=ArrayShape(STRING))
            )

    assert len(candidate) == 1
    assert candidate.finalize() == [CastGround(Ground.STRING, Ground.NUMBER)]
