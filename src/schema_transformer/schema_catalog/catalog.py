"""Bundled schema catalog and schema reference resolution."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from importlib import resources
from pathlib import Path

from schema_transformer.schema_management.schema_models import SchemaDocument
from schema_transformer.schema_management.schema_projection import (
    SchemaError,
    load_schema_document,
)

_LOGGER = logging.getLogger(__name__)

_DATA_PACKAGE = "schema_transformer.schema_catalog"
_BUNDLED_SCHEMA_FILES: dict[str, str] = {
    "advanced1": "advanced1.json",
    "advanced1-split": "advanced1_split.json",
}


def list_bundled_schemas() -> tuple[str, ...]:
    """Return the names of the schemas shipped with the package."""
    return tuple(_BUNDLED_SCHEMA_FILES)


def load_bundled_schema(name: str) -> SchemaDocument:
    """Load one bundled schema by name."""
    filename = _BUNDLED_SCHEMA_FILES.get(name)
    if filename is None:
        available = ", ".join(_BUNDLED_SCHEMA_FILES)
        raise SchemaError(f"Unknown bundled schema '{name}'. Available: {available}")
    data_file = resources.files(_DATA_PACKAGE).joinpath("data", filename)
    text = data_file.read_text(encoding="utf-8")
    return load_schema_document(text, name=name)


def load_schema_file(path: Path | str, *, name: str | None = None) -> SchemaDocument:
    """Load a schema document from a JSON file."""
    schema_path = Path(path)
    if not schema_path.is_file():
        raise SchemaError(f"Schema file not found: {schema_path}")
    try:
        text = schema_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Failed to read schema file {schema_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise SchemaError(f"Schema file {schema_path} is not valid UTF-8: {exc}") from exc
    return load_schema_document(text, name=name or schema_path.stem, source_path=schema_path)


def resolve_schema(
    reference: str, extra_schemas: Mapping[str, Path] | None = None
) -> SchemaDocument:
    """Resolve a bundled name, a configured name or a file path to a schema document.

    Args:
      reference: Schema name or path to a JSON schema file.
      extra_schemas: Named schema files registered through configuration.

    Raises:
      SchemaError: If the reference matches nothing or the schema cannot be parsed.
    """
    if reference in _BUNDLED_SCHEMA_FILES:
        _LOGGER.debug("Resolved %s to a bundled schema", reference)
        return load_bundled_schema(reference)
    if extra_schemas and reference in extra_schemas:
        _LOGGER.debug("Resolved %s to configured file %s", reference, extra_schemas[reference])
        return load_schema_file(extra_schemas[reference], name=reference)
    if Path(reference).is_file():
        _LOGGER.debug("Resolved %s to a schema file", reference)
        return load_schema_file(reference)
    raise SchemaError(f"Unknown schema reference '{reference}': not a schema name or file.")
