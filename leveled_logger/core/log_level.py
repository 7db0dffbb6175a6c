"""
Severity enumeration

Ranks are ordered from most urgent (0) to least urgent (5). A threshold of
rank N lets every message of rank <= N through.
"""

from enum import IntEnum
import re
from typing import Dict, Optional, Union


# Sentinel returned for unknown level names; outside the valid range
INVALID_LEVEL = -1

# Valid ranks, inclusive on both ends
MIN_LEVEL = 0
MAX_LEVEL = 5

# Plain ASCII integer, optionally negative
RANK_PATTERN = re.compile(r"-?[0-9]+")


class Severity(IntEnum):
    """
    Severity rank enumeration.

    Lower values are more severe and therefore filtered out last.
    """

    ERROR = 0
    INFO = 1
    PARSER = 2
    CF = 3
    MORPH = 4
    DEBUG = 5

    def __str__(self) -> str:
        """String representation of severity (lowercase method name)."""
        return self.name.lower()

    @classmethod
    def from_string(cls, level_str: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            level_str: Severity name (case-insensitive)

        Returns:
            Severity enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid severity: {level_str}")

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this severity.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Severity.ERROR: "\033[91m",     # Light red
            Severity.INFO: "\033[0m",       # Default
            Severity.PARSER: "\033[36m",    # Cyan
            Severity.CF: "\033[34m",        # Blue
            Severity.MORPH: "\033[35m",     # Magenta
            Severity.DEBUG: "\033[37m",     # White
        }
        return colors.get(self, "\033[0m")


WARNING_COLOR = "\033[33m"  # Yellow
RESET_CODE = "\033[0m"

# Mapping from severity to lowercase names used by Logger methods
SEVERITY_NAMES: Dict[Severity, str] = {level: str(level) for level in Severity}

# Reverse mapping
SEVERITY_FROM_NAME: Dict[str, Severity] = {v: k for k, v in SEVERITY_NAMES.items()}


def normalized_level(level: Union[Severity, int, str, None]) -> int:
    """
    Normalize a level given as rank, Severity or name into an integer rank.

    Integers pass through unchanged (even when out of range). Names are
    looked up case-insensitively; a string made of digits is read as a rank.
    Anything unknown maps to INVALID_LEVEL so that is_valid_level() fails.

    Args:
        level: Rank, Severity, or severity name

    Returns:
        Integer rank, or INVALID_LEVEL
    """
    if isinstance(level, bool) or level is None:
        return INVALID_LEVEL
    if isinstance(level, int):
        return int(level)

    text = str(level).strip()
    if RANK_PATTERN.fullmatch(text):
        return int(text)

    severity = SEVERITY_FROM_NAME.get(text.lower())
    return int(severity) if severity is not None else INVALID_LEVEL


def is_valid_level(level: int) -> bool:
    """Check whether a normalized rank lies in the valid inclusive range."""
    return MIN_LEVEL <= level <= MAX_LEVEL


def to_severity(level: Union[Severity, int, str, None]) -> Optional[Severity]:
    """
    Convert a level to Severity.

    Returns:
        Severity, or None if the level does not normalize to a valid rank
    """
    rank = normalized_level(level)
    return Severity(rank) if is_valid_level(rank) else None
