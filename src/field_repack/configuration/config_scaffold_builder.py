"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "repack.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Settings for field-repack. Every section and key is optional;
# omitted values fall back to the defaults shown here.

matching:
  # optimal (Hungarian assignment) or greedy (nearest remaining candidate).
  strategy: optimal
  # Trailing characters of each path scored a second time.
  suffix_length: 5
  indel_cost: 1
  substitution_cost: 2
  # Refuse to match schemas with more leaves than this on either side.
  max_fields: 500
  # Leaves whose path contains one of these field names are left out.
  ignore: []

schema:
  # Namespaces whose nested records are flattened. Remove to flatten all.
  # local_namespaces:
  #   - myapp
  max_depth: 32

render:
  # python -> Type(name=value,)   brace -> Type{Name: value,}
  style: python
  blank: "..."
  indent: "    "
"""


def build_placeholder_configuration() -> str:
    """Build a YAML settings template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the settings template to the requested output path.

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
        raise FileExistsError(f"Refusing to overwrite existing file: {destination}")
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
