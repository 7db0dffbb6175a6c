"""Console writer with optional ANSI colors"""

import sys
from typing import Optional
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import RESET_CODE


class ConsoleWriter:
    """Write log lines to the console, one line per call."""

    def __init__(self, colored: bool = False, stream=None):
        """
        Initialize console writer.

        Args:
            colored: Use ANSI color codes
            stream: Output stream (default: sys.stdout, looked up on every write)
        """
        self.colored = colored
        self._stream = stream

    @property
    def stream(self):
        return self._stream if self._stream is not None else sys.stdout

    def write(self, entry: LogEntry):
        """Write the formatted text of a log entry."""
        color = entry.color_code if self.colored else None
        self.write_line(entry.text, color)

    def write_line(self, text: str, color: Optional[str] = None):
        """Write a single unstored line, e.g. diagnostics or bare output."""
        if color and self.colored:
            text = f"{color}{text}{RESET_CODE}"

        stream = self.stream
        stream.write(text + "\n")
        stream.flush()
