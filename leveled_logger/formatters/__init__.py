"""
Log formatters module

Formatters turn a LogEntry into the line that is stored and written.
"""

from leveled_logger.formatters.base_formatter import BaseFormatter
from leveled_logger.formatters.line_formatter import LineFormatter

__all__ = [
    "BaseFormatter",
    "LineFormatter",
]
