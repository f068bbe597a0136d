"""
Configuration & Layout Metrics
==============================
This module serves as the central registry for the sizing constants used by
the layout engine and for the environment-driven settings of the demo.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (row heights, margins, paddings)
   from being scattered throughout the layout code.
2. Scaling: A single frozen metrics object can be scaled for HiDPI hosts
   without touching the layout algorithm.

Exports:
    LayoutMetrics: Frozen dataclass with all pixel constants.
    DEFAULT_METRICS (LayoutMetrics): The reference sizing.
    LOG_LEVEL_ENV (str): Environment variable holding the demo log level.
    LOG_FILE_ENV (str): Environment variable holding an optional log file path.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

LOG_LEVEL_ENV: str = "KEYVALUEGRID_LOG_LEVEL"
LOG_FILE_ENV: str = "KEYVALUEGRID_LOG_FILE"

# Fields that must stay strictly positive, everything else may be zero.
_POSITIVE_FIELDS = ("char_width", "min_key_width", "label_height", "input_height")


@dataclass(frozen=True)
class LayoutMetrics:
    # Key column
    char_width: int = 6
    key_padding: int = 16
    min_key_width: int = 70

    # Rows and group boxes
    label_height: int = 24
    input_height: int = 25
    input_pad: int = 4
    side_margin: int = 20
    top_offset: int = 15
    group_gap: int = 10

    # Group name label
    label_inset: int = 10
    label_padding: int = 20
    label_raise: int = 7

    # Key label / value field placement inside a box
    row_inset: int = 15
    value_gap: int = 5
    value_right_margin: int = 35

    # Fonts (points)
    group_label_font_size: int = 10
    key_label_font_size: int = 12

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0:
                raise ValueError(f"LayoutMetrics.{f.name} must not be negative, got {value}.")
            if f.name in _POSITIVE_FIELDS and value == 0:
                raise ValueError(f"LayoutMetrics.{f.name} must be positive.")

    def scaled(self, factor: float) -> LayoutMetrics:
        """
        Return a copy with every size multiplied by `factor`.

        Args:
            factor: Scale factor, e.g. the device pixel ratio of the host screen.
        """
        if factor <= 0:
            raise ValueError(f"Scale factor must be positive, got {factor}.")
        values: dict[str, int] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            # Zero stays zero, anything else never collapses below one pixel
            values[f.name] = max(1, round(value * factor)) if value else 0
        return replace(self, **values)


DEFAULT_METRICS = LayoutMetrics()


def log_level_from_env(default: int = logging.INFO) -> int:
    """Resolve the log level name stored in KEYVALUEGRID_LOG_LEVEL."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def log_file_from_env() -> Optional[str]:
    path = os.environ.get(LOG_FILE_ENV, "").strip()
    return path or None
