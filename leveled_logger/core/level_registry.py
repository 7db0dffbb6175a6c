"""
Level registry - process-wide threshold and logger bookkeeping

Every Logger registers itself here on construction and asks the registry
whether a severity is currently enabled before emitting anything.
"""

from __future__ import annotations
from enum import Enum
from typing import TYPE_CHECKING, List, Optional, Pattern, Union
import threading

from leveled_logger.core.log_level import (
    Severity,
    normalized_level,
    is_valid_level,
    to_severity,
)
from leveled_logger.core.registry_config import RegistryConfig, DEFAULT_LEVEL
from leveled_logger.filters.base_filter import BaseFilter
from leveled_logger.filters.pattern_filter import PatternFilter, ERROR_FILTER, WARNING_FILTER
from leveled_logger.writers.console_writer import ConsoleWriter

if TYPE_CHECKING:
    from leveled_logger.core.logger import Logger


LevelValue = Union[Severity, int, str, None]


class CountField(Enum):
    """Per-logger quantity summed by LevelRegistry.count()."""

    LINES = "lines"
    ERRORS = "errors"
    WARNINGS = "warnings"

    def read(self, logger: "Logger") -> int:
        if self is CountField.ERRORS:
            return logger.error_count
        if self is CountField.WARNINGS:
            return logger.warning_count
        return logger.count()


class LevelRegistry:
    """
    Holds the severity threshold and the loggers created against it.

    A threshold of None means logging is disabled: no logger emits anything.
    Otherwise it is a Severity and a message of rank r is emitted iff
    r <= threshold.

    Thread Safety:
        Threshold changes, registration and clearing are guarded by one lock.

    Example:
        registry = LevelRegistry(RegistryConfig(level="parser"))
        parser_log = Logger("Parser", registry=registry)
        parser_log.parser("token accepted")
        registry.threshold = None      # silence everything
    """

    def __init__(self, config: Optional[RegistryConfig] = None, writer: Optional[ConsoleWriter] = None):
        """
        Initialize level registry.

        Args:
            config: Registry configuration (default: RegistryConfig.default())
            writer: Shared output channel (default: ConsoleWriter built from config)
        """
        self._config = config or RegistryConfig.default()
        self._writer = writer or ConsoleWriter(
            colored=self._config.colored_output,
            stream=self._config.stream,
        )
        self._threshold: Optional[Severity] = None
        self._loggers: List["Logger"] = []
        self._lock = threading.RLock()

        self.set_threshold(self._config.level)

    @property
    def writer(self) -> ConsoleWriter:
        return self._writer

    @property
    def config(self) -> RegistryConfig:
        return self._config

    # Threshold

    @property
    def threshold(self) -> Optional[Severity]:
        """Current threshold, or None when disabled."""
        return self._threshold

    @threshold.setter
    def threshold(self, value: LevelValue) -> None:
        self.set_threshold(value)

    def get_threshold(self) -> Optional[Severity]:
        """Return the current threshold, or None when disabled."""
        return self._threshold

    def set_threshold(self, value: LevelValue) -> Optional[Severity]:
        """
        Set the threshold.

        Args:
            value: Rank, Severity, or severity name. None disables logging.

        Returns:
            The threshold now in effect

        Note:
            Unknown or out-of-range values never raise. The previous
            threshold is kept (DEFAULT_LEVEL if logging was disabled) and a
            diagnostic line is written to the output channel.
        """
        with self._lock:
            if value is None:
                self._threshold = None
                return None

            severity = to_severity(value)
            if severity is None:
                fallback = self._threshold if self._threshold is not None else DEFAULT_LEVEL
                self._writer.write_line(
                    f"LOG LEVEL ERROR {value} is unknown - falling back to {int(fallback)}",
                    Severity.ERROR.color_code,
                )
                severity = Severity(fallback)

            self._threshold = severity
            return self._threshold

    def is_enabled(self, rank: LevelValue = None) -> bool:
        """
        Check whether logging is enabled.

        Args:
            rank: Optional severity rank or name to check

        Returns:
            Without rank: True unless logging is disabled.
            With rank: True iff enabled, rank is a valid rank (0..5)
            and rank <= threshold. Unknown names are never enabled.
        """
        threshold = self._threshold
        if threshold is None:
            return False
        if rank is None:
            return True
        level = normalized_level(rank)
        return is_valid_level(level) and level <= threshold

    # Instances

    @property
    def loggers(self) -> List["Logger"]:
        """Snapshot of registered loggers, in registration order."""
        with self._lock:
            return list(self._loggers)

    def register(self, logger: "Logger") -> "Logger":
        """Register a logger. Called once by every Logger constructor."""
        with self._lock:
            self._loggers.append(logger)
        return logger

    def unregister(self, logger: "Logger") -> None:
        """
        Remove a logger from the registry.

        The logger object keeps working; it just stops counting towards
        aggregate queries. Does nothing if the logger is not registered.
        """
        with self._lock:
            self._loggers = [item for item in self._loggers if item is not logger]

    def clear(self) -> None:
        """Forget all registered loggers."""
        with self._lock:
            self._loggers.clear()

    def reset(self, config: Optional[RegistryConfig] = None) -> None:
        """Clear all loggers and restore the threshold from configuration."""
        with self._lock:
            if config is not None:
                self._config = config
            self._loggers.clear()
            self._threshold = None
            self.set_threshold(self._config.level)

    def __len__(self) -> int:
        return len(self._loggers)

    def __contains__(self, logger: object) -> bool:
        return any(item is logger for item in self._loggers)

    # Aggregates

    def count(self, field: CountField = CountField.LINES) -> int:
        """
        Sum a per-logger quantity over all registered loggers.

        Args:
            field: Quantity to sum (default: stored line count)

        Returns:
            Total, 0 when nothing is registered
        """
        return sum(field.read(logger) for logger in self.loggers)

    def count_errors(self) -> int:
        """Total number of errors logged by registered loggers."""
        return self.count(CountField.ERRORS)

    def count_warnings(self) -> int:
        """Total number of warnings logged by registered loggers."""
        return self.count(CountField.WARNINGS)

    def messages(self) -> List[str]:
        """All stored lines, by registration order and then insertion order."""
        lines: List[str] = []
        for logger in self.loggers:
            lines.extend(logger.logs)
        return lines

    def filtered(self, log_filter: BaseFilter) -> List[str]:
        """Stored lines selected by a filter."""
        return log_filter.select(self.messages())

    def errors(self) -> List[str]:
        """All stored error lines."""
        return self.filtered(ERROR_FILTER)

    def warnings(self) -> List[str]:
        """All stored warning lines."""
        return self.filtered(WARNING_FILTER)

    def messages_that_match(self, pattern: Union[str, Pattern], case_sensitive: bool = True) -> List[str]:
        """
        Stored lines matching a regular expression.

        Args:
            pattern: Regex string or compiled pattern, searched anywhere in the line
            case_sensitive: Whether a string pattern is matched case-sensitively
        """
        return self.filtered(PatternFilter(pattern, case_sensitive=case_sensitive))

    # Output

    def write_line(self, text: str, color: Optional[str] = None) -> None:
        """Write an unstored line to the shared output channel."""
        self._writer.write_line(text, color)

    def __repr__(self) -> str:
        """String representation."""
        level = "disabled" if self._threshold is None else str(self._threshold)
        return f"LevelRegistry(threshold={level}, loggers={len(self._loggers)})"


_default_registry: Optional[LevelRegistry] = None
_default_lock = threading.Lock()


def get_default_registry() -> LevelRegistry:
    """
    Return the process-wide registry, creating it on first use.

    The first call reads the initial threshold from the LLT_DEBUG
    environment variable.
    """
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = LevelRegistry(RegistryConfig.from_env())
        return _default_registry


def set_default_registry(registry: Optional[LevelRegistry]) -> None:
    """Replace the process-wide registry (None recreates it lazily)."""
    global _default_registry
    with _default_lock:
        _default_registry = registry

