"""
Line formatter

Builds ``<indentation><title>: <tag><message>`` lines
"""

from leveled_logger.core.log_entry import LogEntry
from leveled_logger.formatters.base_formatter import BaseFormatter


class LineFormatter(BaseFormatter):
    """
    Format log entries as plain indented lines.

    The title prefix is only added when the entry carries a logger name.
    The tag (``ERROR! ``/``WARNING! ``) precedes the message, so
    classification by substring search works on the formatted text.
    """

    def __init__(self, title_separator: str = ": "):
        """
        Initialize line formatter.

        Args:
            title_separator: Text placed between title and message

        Example:
            formatter = LineFormatter()
            # "  Parser: ERROR! unexpected token"
        """
        self.title_separator = title_separator

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry as a single line.

        Args:
            entry: Log entry to format

        Returns:
            Formatted string
        """
        title = f"{entry.logger_name}{self.title_separator}" if entry.logger_name else ""
        return f"{entry.indent}{title}{entry.tag}{entry.message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(title_separator='{self.title_separator}')"
