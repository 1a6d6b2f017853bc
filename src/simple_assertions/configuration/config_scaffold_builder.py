"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "simple-assertions.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for simple-assertions.
# Every section is optional; omitted keys fall back to the defaults shown here.

collection_matching:
  # Field names skipped by field-by-field record comparison.
  excluded_fields: []
  # Log the first differing field at DEBUG level.
  log_field_mismatches: true
  # Truncate rendered leftover records to this many characters (0 = unlimited).
  max_rendered_length: 0

log_capture:
  # Lowest level captured while a capture block is active.
  level: "DEBUG"
  # Ignore events logged by other threads through the same logger name.
  only_current_thread: false
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

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
