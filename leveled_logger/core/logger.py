"""
Main Logger class - leveled, titled and indented output with stored history
"""

from __future__ import annotations
from typing import Callable, Dict, List, Optional, Union
import threading

from leveled_logger.core.log_level import Severity, SEVERITY_FROM_NAME
from leveled_logger.core.log_entry import LogEntry, ERROR_TAG, WARNING_TAG
from leveled_logger.core.level_registry import LevelRegistry, get_default_registry
from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.line_formatter import LineFormatter


Indent = Union[str, int]

WARNING = "warning"


def to_whitespace(indent: Indent) -> str:
    """Normalize an indent: an int N becomes N spaces, strings pass through."""
    if isinstance(indent, int) and not isinstance(indent, bool):
        return " " * max(indent, 0)
    return indent


class Logger:
    """
    Leveled logger with a title, an indentation prefix and a stored history.

    Every instance registers itself with its LevelRegistry. A message is only
    formatted, stored and printed if the registry enables its severity.

    Example:
        log = Logger("Parser", 2)
        log.info("started")            # "  Parser: started"
        log.error("bad token", 2)      # "    Parser: ERROR! bad token"
    """

    def __init__(
        self,
        title: str = "",
        indent: Indent = "",
        *,
        default: Union[str, Severity] = "info",
        registry: Optional[LevelRegistry] = None,
        formatter: Optional[BaseFormatter] = None,
    ):
        """
        Initialize logger and register it.

        Args:
            title: Prefixed as "<title>: " to every stored line when non-empty
            indent: Indentation prefix, string or number of spaces
            default: Severity name used by log() and bare()
            registry: Registry to register with (default: process-wide one)
            formatter: Line formatter (default: LineFormatter)

        Raises:
            ValueError: If default is not a known severity name
        """
        default_name = str(default).lower()
        if default_name != WARNING and default_name not in SEVERITY_FROM_NAME:
            raise ValueError(f"Invalid default severity: {default}")

        self._title = title
        self._indent = to_whitespace(indent)
        self._default = default_name
        self._registry = registry if registry is not None else get_default_registry()
        self._formatter = formatter or LineFormatter()
        self._entries: List[LogEntry] = []
        self._logs: List[str] = []
        self._errors = 0
        self._warnings = 0
        self._lock = threading.Lock()

        self._dispatch: Dict[str, Callable[..., Optional[LogEntry]]] = {
            "error": self.error,
            WARNING: self.warning,
            "info": self.info,
            "parser": self.parser,
            "cf": self.cf,
            "morph": self.morph,
            "debug": self.debug,
        }
        self._default_method = self._dispatch[self._default]

        self._registry.register(self)

    @property
    def title(self) -> str:
        return self._title

    @property
    def indent(self) -> str:
        return self._indent

    @property
    def default(self) -> str:
        return self._default

    @property
    def default_severity(self) -> Severity:
        """Severity rank of the default; warnings are gated at INFO."""
        if self._default == WARNING:
            return Severity.INFO
        return SEVERITY_FROM_NAME[self._default]

    @property
    def registry(self) -> LevelRegistry:
        return self._registry

    @property
    def logs(self) -> List[str]:
        """Stored lines (copy)."""
        with self._lock:
            return list(self._logs)

    @property
    def entries(self) -> List[LogEntry]:
        """Stored entries (copy), parallel to logs."""
        with self._lock:
            return list(self._entries)

    @property
    def error_count(self) -> int:
        return self._errors

    @property
    def warning_count(self) -> int:
        return self._warnings

    def count(self) -> int:
        """Number of stored lines."""
        return len(self._logs)

    def log(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log a message with the default severity."""
        return self._default_method(message, indent)

    def error(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log error message."""
        return self._emit(Severity.ERROR, message, indent, tag=ERROR_TAG)

    def warning(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log warning message."""
        return self._emit(Severity.INFO, message, indent, tag=WARNING_TAG)

    def info(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log info message."""
        return self._emit(Severity.INFO, message, indent)

    def parser(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log parser message."""
        return self._emit(Severity.PARSER, message, indent)

    def cf(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log cf message."""
        return self._emit(Severity.CF, message, indent)

    def morph(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log morph message."""
        return self._emit(Severity.MORPH, message, indent)

    def debug(self, message: str, indent: Indent = "") -> Optional[LogEntry]:
        """Log debug message."""
        return self._emit(Severity.DEBUG, message, indent)

    def bare(self, message: str, indent: Indent = 0) -> bool:
        """
        Print a message without title or own indentation, and without storing it.

        Gated by the default severity.

        Returns:
            True if the message was printed
        """
        if not self._registry.is_enabled(self.default_severity):
            return False
        self._registry.write_line(f"{to_whitespace(indent)}{message}")
        return True

    def _emit(self, level: Severity, message: str, indent: Indent, tag: str = "") -> Optional[LogEntry]:
        if not self._registry.is_enabled(level):
            return None

        entry = LogEntry(
            level=level,
            message=message,
            tag=tag,
            indent=self._indent + to_whitespace(indent),
            logger_name=self._title,
        )
        entry.text = self._formatter.format(entry)

        with self._lock:
            self._entries.append(entry)
            self._logs.append(entry.text)
            if tag == ERROR_TAG:
                self._errors += 1
            elif tag == WARNING_TAG:
                self._warnings += 1

        self._registry.writer.write(entry)
        return entry

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(title='{self._title}', default={self._default}, count={self.count()})"
