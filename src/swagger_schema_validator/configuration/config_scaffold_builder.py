"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "swagger-validator.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Validator configuration template for swagger-schema-validator.
# Replace every <REQUIRED> placeholder before running validate or list-definitions.
# Remove <OPTIONAL> entries you do not need.

spec:
  # Path to the Swagger 2.0 spec, relative to this file or absolute.
  path: "<REQUIRED>"
  # json or yaml; inferred from the file suffix when omitted.
  # format: "<OPTIONAL>"

# Extra vendor keyword renames applied before the built-in x-* renames.
# transformations:
#   x-oneof: "x-oneOf"

validation:
  # Keep validating children of objects/arrays that already failed.
  deep_check: false
  # json or yaml.
  payload_format: "json"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML validator configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder validator configuration template to the requested output path.

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
        raise FileExistsError(
            f"Validator configuration file already exists: {destination.resolve()}"
        )
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
