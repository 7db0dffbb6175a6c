"""
Pattern-based filter using regular expressions

Selects formatted log lines based on content matching
"""

import re
from typing import Union, Pattern
from leveled_logger.filters.base_filter import BaseFilter


class PatternFilter(BaseFilter):
    """
    Select log lines based on regex pattern matching.

    Matching uses search semantics: the pattern may occur anywhere in the line.
    """

    def __init__(
        self,
        pattern: Union[str, Pattern],
        exclude: bool = False,
        case_sensitive: bool = True
    ):
        """
        Initialize pattern filter.

        Args:
            pattern: Regular expression pattern (string or compiled Pattern)
            exclude: If True, select lines that do NOT match
            case_sensitive: Whether pattern matching is case-sensitive

        Example:
            # All error lines
            filter = PatternFilter(r"ERROR!")

            # Everything except warnings
            filter = PatternFilter(r"WARNING!", exclude=True)
        """
        if isinstance(pattern, str):
            flags = 0 if case_sensitive else re.IGNORECASE
            self.pattern = re.compile(pattern, flags)
        else:
            self.pattern = pattern

        self.exclude = exclude

    def matches(self, text: str) -> bool:
        """
        Check if a line matches the pattern.

        Args:
            text: Formatted log line

        Returns:
            True if the line is selected, False otherwise
        """
        found = self.pattern.search(text) is not None
        return not found if self.exclude else found

    def __repr__(self) -> str:
        """String representation."""
        mode = "exclude" if self.exclude else "include"
        return f"PatternFilter(pattern='{self.pattern.pattern}', mode={mode})"


# Filters keyed on the tags embedded by the formatter
ERROR_FILTER = PatternFilter(re.escape("ERROR!"))
WARNING_FILTER = PatternFilter(re.escape("WARNING!"))
