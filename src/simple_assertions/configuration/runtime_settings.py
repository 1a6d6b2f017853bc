"""Configuration domain entities."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class CollectionMatchingSettings:
    """Defaults applied by collection matching assertions."""

    excluded_fields: frozenset[str] = frozenset()
    log_field_mismatches: bool = True
    max_rendered_length: int = 0


@dataclass(frozen=True)
class LogCaptureSettings:
    """Defaults applied when capturing log events."""

    level: int = logging.DEBUG
    only_current_thread: bool = False


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None = None
    collection_matching: CollectionMatchingSettings = field(
        default_factory=CollectionMatchingSettings
    )
    log_capture: LogCaptureSettings = field(default_factory=LogCaptureSettings)
