"""Shared field inventory constants."""

from __future__ import annotations

FIELDS_SHEET_NAME = "Fields"
SCHEMA_SHEET_NAME = "Schema"

FIELD_COLUMNS: tuple[str, ...] = ("Path", "Type", "Required", "Constraints")

CONSTRAINT_KEYWORDS: tuple[str, ...] = (
    "format",
    "pattern",
    "minLength",
    "maxLength",
    "minimum",
    "maximum",
    "minItems",
    "maxItems",
    "uniqueItems",
    "additionalProperties",
)
