"""Record checking entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class RecordViolation:
    """One way a record fails to conform to a schema."""

    path: str
    message: str
    keyword: str
