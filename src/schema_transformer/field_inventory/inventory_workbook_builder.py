"""Excel field inventory generation service."""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from schema_transformer.schema_management.schema_models import FlattenedField, SchemaDocument

from .constants import CONSTRAINT_KEYWORDS, FIELD_COLUMNS, FIELDS_SHEET_NAME, SCHEMA_SHEET_NAME


def write_field_inventory(
    document: SchemaDocument,
    fields: Sequence[FlattenedField],
    output_path: Path | str,
) -> Path:
    """Create a workbook listing every flattened field with its type and constraints."""
    workbook = Workbook()
    sheet = workbook.active
    if sheet is None:
        raise RuntimeError("Workbook active sheet is not available.")
    assert isinstance(sheet, Worksheet)
    sheet.title = FIELDS_SHEET_NAME

    for column_index, name in enumerate(FIELD_COLUMNS, start=1):
        cell = sheet.cell(row=1, column=column_index, value=name)
        cell.style = "Headline 3"

    for row_index, field in enumerate(fields, start=2):
        values = (
            field.path,
            describe_field_type(field.definition),
            "yes" if field.required else "no",
            describe_constraints(field.definition),
        )
        for column_index, value in enumerate(values, start=1):
            sheet.cell(row=row_index, column=column_index, value=value)

    for column_index in range(1, len(FIELD_COLUMNS) + 1):
        longest = max(
            (len(str(cell.value or "")) for cell in sheet[get_column_letter(column_index)]),
            default=0,
        )
        sheet.column_dimensions[get_column_letter(column_index)].width = max(
            12, min(longest + 4, 60)
        )

    _write_schema_sheet(workbook, document)

    destination = Path(output_path)
    destination.parent.mkdir(parents=True, exist_ok=True)
    workbook.save(destination)
    return destination.resolve()


def describe_field_type(definition: Any) -> str:
    if not isinstance(definition, Mapping):
        return "any" if definition is True else "never"
    node_type = definition.get("type")
    if isinstance(node_type, list):
        return " | ".join(str(value) for value in node_type)
    if node_type == "array":
        items = definition.get("items")
        return f"array<{describe_field_type(items)}>" if items is not None else "array"
    if isinstance(node_type, str):
        return node_type
    return "any"


def describe_constraints(definition: Any) -> str:
    if not isinstance(definition, Mapping):
        return ""
    parts = [
        f"{keyword}={json.dumps(definition[keyword])}"
        for keyword in CONSTRAINT_KEYWORDS
        if keyword in definition
    ]
    items = definition.get("items")
    if isinstance(items, Mapping):
        item_constraints = describe_constraints(items)
        if item_constraints:
            parts.append(f"items: {item_constraints}")
    return "; ".join(parts)


def _write_schema_sheet(workbook: Workbook, document: SchemaDocument) -> None:
    sheet = workbook.create_sheet(SCHEMA_SHEET_NAME)
    schema_hash = hashlib.sha256(document.text.encode("utf-8")).hexdigest()
    entries = [
        ("schema_name", document.name),
        ("schema_title", document.title or ""),
        ("schema_hash", schema_hash),
        ("schema_text", document.text),
    ]
    for row_index, (key, value) in enumerate(entries, start=1):
        sheet.cell(row=row_index, column=1, value=key)
        sheet.cell(row=row_index, column=2, value=value)
