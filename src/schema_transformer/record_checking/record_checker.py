"""Record conformance checks delegated to the jsonschema library."""

from __future__ import annotations

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonschema import FormatChecker
from jsonschema.exceptions import SchemaError as JsonSchemaDefinitionError
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

from schema_transformer.schema_management.schema_models import SchemaDocument

from .record_models import RecordViolation


class RecordCheckError(Exception):
    """Raised when a record cannot be checked at all."""


def check_record(document: SchemaDocument, record: Any) -> tuple[RecordViolation, ...]:
    """Return every violation of ``record`` against ``document``; empty when it conforms."""
    validator_cls = validator_for(document.root)
    try:
        validator_cls.check_schema(document.root)
    except JsonSchemaDefinitionError as exc:
        raise RecordCheckError(
            f"Schema '{document.name}' is not a valid JSON schema: {exc.message}"
        ) from exc

    validator = validator_cls(document.root, format_checker=FormatChecker())
    return tuple(sorted(_to_violations(validator.iter_errors(record))))


def load_record(path: Path | str) -> Any:
    """Read a JSON record from disk."""
    record_path = Path(path)
    try:
        return json.loads(record_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RecordCheckError(f"Failed to read record {record_path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise RecordCheckError(f"Record {record_path} is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise RecordCheckError(f"Record {record_path} is not valid JSON: {exc}") from exc


def _to_violations(errors: Iterable[ValidationError]) -> list[RecordViolation]:
    return [
        RecordViolation(
            path=_format_path(error.absolute_path),
            message=error.message,
            keyword=str(error.validator),
        )
        for error in errors
    ]


def _format_path(parts: Iterable[str | int]) -> str:
    path = "$"
    for part in parts:
        path += f"[{part}]" if isinstance(part, int) else f".{part}"
    return path
