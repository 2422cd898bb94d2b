"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CatalogSettings:
    """Schema files registered by name in addition to the bundled schemas."""

    schemas: Mapping[str, Path] = field(default_factory=dict)


@dataclass(frozen=True)
class CodegenSettings:
    """JavaScript function rendering options."""

    argument_name: str = "input"
    function_name: str | None = None


@dataclass(frozen=True)
class LoggingSettings:
    """Log verbosity for CLI runs."""

    level: str = "WARNING"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    catalog: CatalogSettings = field(default_factory=CatalogSettings)
    codegen: CodegenSettings = field(default_factory=CodegenSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)
