"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "schema-transformer.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for schema-transformer.
# Every section is optional; remove the ones you do not need.

catalog:
  # Extra schemas addressable by name, paths relative to this file.
  # Names must not reuse a bundled schema name (advanced1, advanced1-split).
  schemas:
    # person: "schemas/person.json"

codegen:
  # JavaScript identifier used for the generated function's argument.
  argument_name: "input"
  # Uncomment to emit a named function instead of an anonymous one.
  # function_name: "toTarget"

logging:
  # One of CRITICAL, ERROR, WARNING, INFO, DEBUG.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
