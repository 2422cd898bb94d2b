"""Shape model tests."""

from __future__ import annotations

import pytest
from schema_transformer.schema_catalog import load_bundled_schema
from schema_transformer.schema_management.schema_projection import SchemaError
from schema_transformer.schema_management.shape_models import (
    AnyShape,
    ArrayShape,
    Ground,
    GroundShape,
    NeverShape,
    ObjectShape,
    describe_shape,
    parse_shape,
)

STRING = GroundShape(Ground.STRING)


def test_parses_every_ground_type() -> None:
    for ground in Ground:
        assert parse_shape({"type": ground.value}) == GroundShape(ground)


def test_boolean_schemas_map_to_trivial_shapes() -> None:
    assert parse_shape(True) == AnyShape()
    assert parse_shape(False) == NeverShape()


def test_object_properties_are_sorted_and_constraints_ignored() -> None:
    shape = parse_shape(
        {
            "type": "object",
            "properties": {
                "zip": {"type": "string", "pattern": "^[0-9]{5}$"},
                "city": {"type": "string"},
            },
        }
    )

    assert shape == ObjectShape((("city", STRING), ("zip", STRING)))
    assert isinstance(shape, ObjectShape)
    assert shape.names == ("city", "zip")
    assert shape.get("zip") == STRING
    assert shape.get("street") is None


def test_shared_address_shape_is_equal_and_hashable() -> None:
    person = parse_shape(load_bundled_schema("advanced1").root)
    split = parse_shape(load_bundled_schema("advanced1-split").root)
    assert isinstance(person, ObjectShape)
    assert isinstance(split, ObjectShape)

    addresses = {person.get("address"), split.get("homeAddress"), split.get("workAddress")}

    assert len(addresses) == 1
    assert person.get("phoneNumbers") == ArrayShape(STRING)
    assert split.get("homePhone") == STRING


@pytest.mark.parametrize(
    ("node", "message"),
    [
        ({"type": "array"}, "Array schema requires items"),
        ({"type": "object"}, "Object schema requires properties"),
        ({"type": "object", "properties": []}, "Object schema requires properties"),
        ({"properties": {}}, "'type' must be a single type name"),
        ({"type": ["string", "null"]}, "'type' must be a single type name"),
        ({"type": "date"}, "Unsupported schema type: date"),
        ("string", "expected an object or a boolean"),
    ],
)
def test_invalid_nodes_raise_schema_error(node: object, message: str) -> None:
    with pytest.raises(SchemaError, match=message):
        parse_shape(node)


def test_describe_shape_renders_nested_structure() -> None:
    shape = parse_shape(
        {
            "type": "object",
            "properties": {
                "tags": {"type": "array", "items": {"type": "string"}},
                "extra": True,
                "age": {"type": "integer"},
            },
        }
    )

    assert describe_shape(shape) == "{age: integer, extra: any, tags: [string]}"
    assert describe_shape(NeverShape()) == "never"
