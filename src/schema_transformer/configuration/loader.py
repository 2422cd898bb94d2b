"""Configuration loader service."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from schema_transformer.schema_catalog import list_bundled_schemas

from .runtime_settings import CatalogSettings, CodegenSettings, Configuration, LoggingSettings

_LOGGER = logging.getLogger(__name__)

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
_JS_RESERVED_WORDS = frozenset(
    {
        "arguments", "await", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "eval", "export", "extends",
        "false", "finally", "for", "function", "if", "implements", "import", "in",
        "instanceof", "interface", "let", "new", "null", "package", "private", "protected",
        "public", "return", "static", "super", "switch", "this", "throw", "true", "try",
        "typeof", "var", "void", "while", "with", "yield",
    }
)
_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    configuration = Configuration(
        path=path,
        catalog=_parse_catalog_section(parsed.get("catalog"), path.parent),
        codegen=_parse_codegen_section(parsed.get("codegen")),
        logging=_parse_logging_section(parsed.get("logging")),
    )
    _LOGGER.debug(
        "Loaded configuration %s with %d extra schema(s)", path, len(configuration.catalog.schemas)
    )
    return configuration


def _parse_catalog_section(value: Any, base_path: Path) -> CatalogSettings:
    section = _optional_mapping(value, "catalog")
    raw_schemas = _optional_mapping(section.get("schemas"), "catalog.schemas")
    bundled = set(list_bundled_schemas())
    schemas: dict[str, Path] = {}
    for name, raw_path in raw_schemas.items():
        if not isinstance(name, str) or not name.strip():
            raise ConfigurationError("catalog.schemas names must be non-empty strings.")
        if name in bundled:
            raise ConfigurationError(f"catalog.schemas '{name}' shadows a bundled schema.")
        path_value = _require_non_empty_string(raw_path, f"catalog.schemas.{name}")
        schema_path = _resolve_path(base_path, path_value)
        if not schema_path.is_file():
            raise ConfigurationError(f"Schema file not found: {schema_path}")
        schemas[name] = schema_path
    return CatalogSettings(schemas=schemas)


def _parse_codegen_section(value: Any) -> CodegenSettings:
    section = _optional_mapping(value, "codegen")
    argument_name = _require_identifier(
        section.get("argument_name", "input"), "codegen.argument_name"
    )
    function_name_raw = section.get("function_name")
    function_name = (
        None
        if function_name_raw is None
        else _require_identifier(function_name_raw, "codegen.function_name")
    )
    return CodegenSettings(argument_name=argument_name, function_name=function_name)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(section.get("level", "WARNING"), "logging.level").upper()
    if level not in _LOG_LEVELS:
        raise ConfigurationError(f"logging.level must be one of: {', '.join(_LOG_LEVELS)}.")
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_identifier(value: Any, field_name: str) -> str:
    identifier = _require_non_empty_string(value, field_name)
    if not _JS_IDENTIFIER.match(identifier):
        raise ConfigurationError(f"{field_name} must be a JavaScript identifier.")
    if identifier in _JS_RESERVED_WORDS:
        raise ConfigurationError(f"{field_name} must not be a JavaScript reserved word.")
    return identifier
