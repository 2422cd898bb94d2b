"""Schema loading, flattening and structural inspection service."""

from __future__ import annotations

import json
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from .schema_models import FlattenedField, SchemaDocument


class SchemaError(Exception):
    """Raised for schema parsing or flattening failures."""


def load_schema_document(
    text: str, *, name: str, source_path: Path | None = None
) -> SchemaDocument:
    """Parse schema text into a structured document."""
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid JSON schema '{name}': {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError(f"JSON schema '{name}' root must be an object.")

    return SchemaDocument(name=name, text=text, root=root, source_path=source_path)


def flatten_schema(document: SchemaDocument) -> list[FlattenedField]:
    """Return deterministic flattened fields."""
    fields: list[FlattenedField] = []
    seen_paths: set[str] = set()
    _flatten_json_schema(
        document.root, prefix="", required=True, fields=fields, seen_paths=seen_paths
    )
    return fields


def required_properties(node: Mapping[str, Any]) -> tuple[str, ...]:
    """Return the property names an object node lists as required."""
    required = node.get("required", [])
    if not isinstance(required, list):
        raise SchemaError("JSON schema 'required' must be a list of property names.")
    return tuple(name for name in required if isinstance(name, str))


def iter_object_nodes(root: Mapping[str, Any]) -> Iterator[tuple[str, Mapping[str, Any]]]:
    """Yield every object node with its dotted path, root first.

    Array item schemas are reported as ``<path>[]``.
    """
    yield from _iter_object_nodes(root, prefix="")


def open_object_paths(root: Mapping[str, Any]) -> list[str]:
    """Return object node paths that accept keys beyond their declared properties."""
    return [
        path or "$"
        for path, node in iter_object_nodes(root)
        if node.get("additionalProperties", True) is not False
    ]


def collect_patterns(root: Mapping[str, Any]) -> dict[str, str]:
    """Map dotted paths of pattern-constrained string nodes to their patterns."""
    patterns: dict[str, str] = {}
    _collect_patterns(root, prefix="", patterns=patterns)
    return patterns


def _flatten_json_schema(
    node: Any,
    *,
    prefix: str,
    required: bool,
    fields: list[FlattenedField],
    seen_paths: set[str],
) -> None:
    if not isinstance(node, Mapping):
        raise SchemaError("JSON schema nodes must be objects.")

    node_types = _json_schema_types(node)
    if "object" in node_types or ("object" not in node_types and "properties" in node):
        properties = node.get("properties")
        if isinstance(properties, Mapping):
            required_names = set(required_properties(node))
            for key, child in properties.items():
                _flatten_json_schema(
                    child,
                    prefix=_child_path(prefix, key),
                    required=required and key in required_names,
                    fields=fields,
                    seen_paths=seen_paths,
                )
            return

    if prefix:
        _register_field(prefix, node, required, fields, seen_paths)
        return

    raise SchemaError("JSON schema root must define object properties.")


def _json_schema_types(node: Mapping[str, Any]) -> tuple[str, ...]:
    node_type = node.get("type")
    if isinstance(node_type, list):
        filtered = [value for value in node_type if isinstance(value, str) and value != "null"]
        return tuple(filtered) if filtered else ("null",)
    if isinstance(node_type, str):
        return (node_type,)
    return ()


def _iter_object_nodes(node: Any, *, prefix: str) -> Iterator[tuple[str, Mapping[str, Any]]]:
    if not isinstance(node, Mapping):
        return
    node_types = _json_schema_types(node)
    if "object" in node_types or "properties" in node:
        yield prefix, node
        properties = node.get("properties")
        if isinstance(properties, Mapping):
            for key, child in properties.items():
                yield from _iter_object_nodes(child, prefix=_child_path(prefix, key))
    if "array" in node_types:
        yield from _iter_object_nodes(node.get("items"), prefix=f"{prefix}[]")


def _collect_patterns(node: Any, *, prefix: str, patterns: dict[str, str]) -> None:
    if not isinstance(node, Mapping):
        return
    pattern = node.get("pattern")
    if isinstance(pattern, str):
        patterns[prefix or "$"] = pattern
    properties = node.get("properties")
    if isinstance(properties, Mapping):
        for key, child in properties.items():
            _collect_patterns(child, prefix=_child_path(prefix, key), patterns=patterns)
    items = node.get("items")
    if isinstance(items, Mapping):
        _collect_patterns(items, prefix=f"{prefix}[]", patterns=patterns)


def _child_path(prefix: str, key: str) -> str:
    return key if not prefix else f"{prefix}.{key}"


def _register_field(
    path: str,
    definition: Any,
    required: bool,
    fields: list[FlattenedField],
    seen_paths: set[str],
) -> None:
    if not path:
        raise SchemaError("Cannot register a field without a path.")
    if path in seen_paths:
        raise SchemaError(f"Duplicate flattened field detected: {path}")
    seen_paths.add(path)
    fields.append(FlattenedField(path=path, definition=definition, required=required))
