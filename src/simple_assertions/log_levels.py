"""Conversions between logging level numbers and names."""

from __future__ import annotations

import logging


def resolve_level(level: int | str) -> int:
    """Return the numeric logging level for a level number or name."""
    if isinstance(level, bool):
        raise TypeError("Log level must be an int or a level name.")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        levels = logging.getLevelNamesMapping()
        normalized = level.strip().upper()
        if normalized not in levels:
            raise ValueError(f"Unknown log level name: {level!r}")
        return levels[normalized]
    raise TypeError("Log level must be an int or a level name.")


def level_name(level: int) -> str:
    """Return the display name of a numeric logging level."""
    return logging.getLevelName(level)
