"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from simple_assertions.log_levels import resolve_level

from .runtime_settings import CollectionMatchingSettings, Configuration, LogCaptureSettings

_KNOWN_SECTIONS = frozenset({"collection_matching", "log_capture"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate a YAML or JSON configuration file."""
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

    unknown = sorted(str(key) for key in parsed if key not in _KNOWN_SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}")

    return Configuration(
        path=path,
        collection_matching=_parse_collection_matching_section(parsed.get("collection_matching")),
        log_capture=_parse_log_capture_section(parsed.get("log_capture")),
    )


def _parse_collection_matching_section(value: Any) -> CollectionMatchingSettings:
    section = _optional_mapping(value, "collection_matching")
    excluded_fields = _normalize_string_sequence(
        section.get("excluded_fields"), "collection_matching.excluded_fields"
    )
    log_field_mismatches = _require_bool(
        section.get("log_field_mismatches", True), "collection_matching.log_field_mismatches"
    )
    max_rendered_length = _require_non_negative_int(
        section.get("max_rendered_length", 0), "collection_matching.max_rendered_length"
    )
    return CollectionMatchingSettings(
        excluded_fields=frozenset(excluded_fields),
        log_field_mismatches=log_field_mismatches,
        max_rendered_length=max_rendered_length,
    )


def _parse_log_capture_section(value: Any) -> LogCaptureSettings:
    section = _optional_mapping(value, "log_capture")
    level_raw = section.get("level", "DEBUG")
    if isinstance(level_raw, bool) or not isinstance(level_raw, int | str):
        raise ConfigurationError("log_capture.level must be a level name or number.")
    try:
        level = resolve_level(level_raw)
    except ValueError as exc:
        raise ConfigurationError(f"log_capture.level: {exc}") from exc
    only_current_thread = _require_bool(
        section.get("only_current_thread", False), "log_capture.only_current_thread"
    )
    return LogCaptureSettings(level=level, only_current_thread=only_current_thread)


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value


def _require_non_negative_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value < 0:
        raise ConfigurationError(f"{field_name} must not be negative.")
    return value
