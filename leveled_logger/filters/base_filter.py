"""
Base filter interface
"""

from abc import ABC, abstractmethod


class BaseFilter(ABC):
    """
    Abstract base class for log filters.

    Filters decide whether a stored line belongs to a query result.
    """

    @abstractmethod
    def matches(self, text: str) -> bool:
        """
        Determine if a formatted line is selected by this filter.

        Args:
            text: The formatted log line

        Returns:
            True if the line is selected, False otherwise
        """
        pass

    def select(self, lines):
        """Return the lines selected by this filter, order preserved."""
        return [line for line in lines if self.matches(line)]

    def __call__(self, text: str) -> bool:
        """Allow filters to be callable."""
        return self.matches(text)
