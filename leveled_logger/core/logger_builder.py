"""Logger builder pattern"""

from typing import Optional, Union

from leveled_logger.core.logger import Logger, Indent
from leveled_logger.core.level_registry import LevelRegistry
from leveled_logger.core.log_level import Severity
from leveled_logger.formatters.base_formatter import BaseFormatter


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._title = ""
        self._indent: Indent = ""
        self._default: Union[str, Severity] = "info"
        self._registry: Optional[LevelRegistry] = None
        self._formatter: Optional[BaseFormatter] = None

    def with_title(self, title: str) -> "LoggerBuilder":
        """Set logger title."""
        self._title = title
        return self

    def with_indent(self, indent: Indent) -> "LoggerBuilder":
        """Set indentation prefix (string or number of spaces)."""
        self._indent = indent
        return self

    def with_default(self, default: Union[str, Severity]) -> "LoggerBuilder":
        """Set the severity used by log() and bare()."""
        self._default = default
        return self

    def with_registry(self, registry: LevelRegistry) -> "LoggerBuilder":
        """
        Register the logger with a specific registry.

        Args:
            registry: Registry instance (default: process-wide registry)

        Returns:
            Self for method chaining

        Example:
            registry = LevelRegistry(RegistryConfig(level="debug"))
            logger = (LoggerBuilder()
                .with_title("Morph")
                .with_indent(4)
                .with_default("morph")
                .with_registry(registry)
                .build())
        """
        self._registry = registry
        return self

    def with_formatter(self, formatter: BaseFormatter) -> "LoggerBuilder":
        """Use a custom line formatter."""
        self._formatter = formatter
        return self

    def build(self) -> Logger:
        """Build, register and return the configured logger."""
        return Logger(
            self._title,
            self._indent,
            default=self._default,
            registry=self._registry,
            formatter=self._formatter,
        )
