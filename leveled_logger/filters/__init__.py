"""
Log filters module

Filters select formatted lines for registry queries.
"""

from leveled_logger.filters.base_filter import BaseFilter
from leveled_logger.filters.pattern_filter import PatternFilter, ERROR_FILTER, WARNING_FILTER

__all__ = [
    "BaseFilter",
    "PatternFilter",
    "ERROR_FILTER",
    "WARNING_FILTER",
]
