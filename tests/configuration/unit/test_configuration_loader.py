"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from schema_transformer.configuration.loader import ConfigurationError, load_configuration


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_empty_configuration_uses_defaults(tmp_path: Path) -> None:
    config_path = _write_file(tmp_path / "config.yaml", "")

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert dict(configuration.catalog.schemas) == {}
    assert configuration.codegen.argument_name == "input"
    assert configuration.codegen.function_name is None
    assert configuration.logging.level == "WARNING"


def test_loads_yaml_configuration_with_relative_schema_paths(tmp_path: Path) -> None:
    schemas_dir = tmp_path / "schemas"
    schemas_dir.mkdir()
    _write_file(schemas_dir / "person.json", '{"type": "object", "properties": {}}')
    config_path = _write_file(
        tmp_path / "config.yaml",
        """
catalog:
  schemas:
    person: schemas/person.json
codegen:
  argument_name: record
  function_name: toTarget
logging:
  level: debug
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.catalog.schemas == {"person": (schemas_dir / "person.json").resolve()}
    assert configuration.codegen.argument_name == "record"
    assert configuration.codegen.function_name == "toTarget"
    assert configuration.logging.level == "DEBUG"


def test_loads_json_configuration(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json", json.dumps({"codegen": {"argument_name": "$data"}})
    )

    assert load_configuration(config_path).codegen.argument_name == "$data"


def test_missing_configuration_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ("- just\n- a list\n", "root must be a mapping"),
        ("catalog: [1]\n", "'catalog' must be a mapping"),
        ("catalog:\n  schemas:\n    advanced1: x.json\n", "shadows a bundled schema"),
        ("catalog:\n  schemas:\n    person: missing.json\n", "Schema file not found"),
        ("catalog:\n  schemas:\n    person: 3\n", "catalog.schemas.person must be a string"),
        ("codegen:\n  argument_name: 'not valid'\n", "must be a JavaScript identifier"),
        ("codegen:\n  function_name: ''\n", "codegen.function_name must not be empty"),
        ("codegen:\n  argument_name: delete\n", "must not be a JavaScript reserved word"),
        ("codegen:\n  function_name: function\n", "must not be a JavaScript reserved word"),
        ("logging:\n  level: LOUD\n", "logging.level must be one of"),
        ("codegen: {argument_name: [\n", "Failed to parse configuration file"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, message: str) -> None:
    config_path = _write_file(tmp_path / "config.yaml", contents)

    with pytest.raises(ConfigurationError, match=message):
        load_configuration(config_path)
