"""Field inventory exports."""

from .constants import FIELD_COLUMNS, FIELDS_SHEET_NAME, SCHEMA_SHEET_NAME
from .inventory_workbook_builder import (
    describe_constraints,
    describe_field_type,
    write_field_inventory,
)

__all__ = [
    "FIELDS_SHEET_NAME",
    "SCHEMA_SHEET_NAME",
    "FIELD_COLUMNS",
    "describe_constraints",
    "describe_field_type",
    "write_field_inventory",
]
