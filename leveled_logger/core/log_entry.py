"""
Log entry data structure

One stored line of a Logger: the formatted text plus the data it was built from.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict
import threading

from leveled_logger.core.log_level import Severity, WARNING_COLOR


ERROR_TAG = "ERROR! "
WARNING_TAG = "WARNING! "


@dataclass
class LogEntry:
    """
    Log entry data structure.

    ``text`` is filled in by the formatter and is exactly the line that is
    stored in ``Logger.logs`` and written to the output channel.
    """

    level: Severity
    message: str
    tag: str = ""
    indent: str = ""
    logger_name: str = ""
    text: str = ""
    timestamp: datetime = field(default_factory=datetime.now)
    thread_name: str = field(default_factory=lambda: threading.current_thread().name)

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, Severity):
            raise TypeError("level must be Severity enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)

    @property
    def is_error(self) -> bool:
        return self.tag == ERROR_TAG

    @property
    def is_warning(self) -> bool:
        return self.tag == WARNING_TAG

    @property
    def color_code(self) -> str:
        """ANSI color for console output."""
        if self.is_warning:
            return WARNING_COLOR
        return self.level.color_code

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": str(self.level),
            "message": self.message,
            "tag": self.tag.strip(),
            "logger_name": self.logger_name,
            "text": self.text,
            "timestamp": self.timestamp.isoformat(),
            "thread_name": self.thread_name,
        }

    def __str__(self) -> str:
        """String representation is the formatted line."""
        return self.text
