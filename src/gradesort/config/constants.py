"""
Constants and configuration values for grade ordering.

Defines grade bounds, environment naming and logging defaults.
"""

from typing import Final

# Grade bounds (inclusive)
MIN_GRADE: Final[int] = 0
MAX_GRADE: Final[int] = 100

# Environment
ENV_PREFIX: Final[str] = "GRADE_SORT_"
ENV_FILE: Final[str] = ".env"

# Logging
DEFAULT_LOG_LEVEL: Final[str] = "INFO"
LOG_LEVELS: Final[tuple] = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")
LOG_FILE_ROTATION: Final[str] = "10 MB"
LOG_FILE_RETENTION: Final[str] = "30 days"

# Direction aliases accepted in configuration and factories
ASCENDING_ALIASES: Final[frozenset] = frozenset({"ascending", "asc", "+1", "1"})
DESCENDING_ALIASES: Final[frozenset] = frozenset({"descending", "desc", "-1"})
