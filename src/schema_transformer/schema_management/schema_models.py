"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Structured representation of a schema definition."""

    name: str
    text: str
    root: Mapping[str, Any]
    source_path: Path | None = None

    @property
    def title(self) -> str | None:
        title = self.root.get("title")
        return title if isinstance(title, str) else None


@dataclass(frozen=True)
class FlattenedField:
    """Flattened schema field definition."""

    path: str
    definition: Any
    required: bool
