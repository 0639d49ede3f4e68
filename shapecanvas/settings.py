# shapecanvas/settings.py
"""
Generation settings stored with QSettings ("shapecanvas", "shapecanvas").
"""

import logging
from typing import NamedTuple

from PyQt5.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "shapecanvas"
APPLICATION = "shapecanvas"

DEFAULT_COUNT = 10
DEFAULT_MIN_DIMENSION = 1
DEFAULT_MAX_DIMENSION = 100
DEFAULT_LOG_LEVEL = "WARNING"


def open_settings() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def distinct_shape_count(low: int, high: int) -> int:
    """Number of distinct (kind, dimensions) pairs in [low, high]."""
    n = high - low + 1
    # circle and square: n each; oval and rectangle: n*n each
    return 2 * n + 2 * n * n


class GenerationSettings(NamedTuple):
    shape_count: int = DEFAULT_COUNT
    min_dimension: int = DEFAULT_MIN_DIMENSION
    max_dimension: int = DEFAULT_MAX_DIMENSION
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def load(cls, settings: QSettings = None) -> "GenerationSettings":
        """Read the values from ``settings`` (the user settings by default)."""
        if settings is None:
            settings = open_settings()
        loaded = cls(
            shape_count=settings.value("generation/count", DEFAULT_COUNT, type=int),
            min_dimension=settings.value(
                "generation/min_dimension", DEFAULT_MIN_DIMENSION, type=int),
            max_dimension=settings.value(
                "generation/max_dimension", DEFAULT_MAX_DIMENSION, type=int),
            log_level=str(
                settings.value("logging/level", DEFAULT_LOG_LEVEL)).upper(),
        )
        logger.debug("Loaded settings from %s: %s",
                     settings.fileName(), loaded)
        return loaded.validate()

    def validate(self) -> "GenerationSettings":
        if self.shape_count < 1:
            raise ValueError(f"generation/count must be >= 1, got {self.shape_count}")
        if self.min_dimension < 1:
            raise ValueError(
                f"generation/min_dimension must be >= 1, got {self.min_dimension}")
        if self.max_dimension < self.min_dimension:
            raise ValueError(
                "generation/max_dimension must be >= generation/min_dimension "
                f"({self.max_dimension} < {self.min_dimension})")
        available = distinct_shape_count(self.min_dimension, self.max_dimension)
        if self.shape_count > available:
            raise ValueError(
                f"cannot draw {self.shape_count} distinct shapes from "
                f"[{self.min_dimension}, {self.max_dimension}] "
                f"(only {available} exist)")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"unknown logging/level {self.log_level!r}")
        return self
