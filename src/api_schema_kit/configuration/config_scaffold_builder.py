"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "api-schema.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# API configuration template for api-schema-kit.
# Replace every <REQUIRED> placeholder before running generate-openapi or validate-response.
# Replace <OPTIONAL> placeholders only when your setup needs them.

api:
  # Choose exactly one source: an importable module or a Python file path.
  module: "<REQUIRED>"
  # path: "<OPTIONAL>"
  # Attribute holding the list of operations declared with HTTP.GET/POST/...
  operations: "OPERATIONS"
  # Attribute holding the named response table rendered under components.schemas.
  responses: "<OPTIONAL>"

info:
  title: "<REQUIRED>"
  version: "<REQUIRED>"
  description: "<OPTIONAL>"

output:
  # yaml or json
  format: "yaml"

validation:
  # Report every failing array item or dict entry instead of a summary.
  detailed_errors: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML API configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder API configuration template to the requested output path.

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
        raise FileExistsError(f"API configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
