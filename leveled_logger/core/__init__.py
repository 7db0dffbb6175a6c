"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Leveled logger with stored history
- LoggerBuilder: Builder pattern for logger construction
- LevelRegistry: Threshold and logger bookkeeping
- LogEntry: Stored line data structure
- Severity: Severity rank enumeration
- RegistryConfig: Configuration management
"""

from leveled_logger.core.log_level import Severity
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.registry_config import RegistryConfig
from leveled_logger.core.level_registry import (
    LevelRegistry,
    CountField,
    get_default_registry,
    set_default_registry,
)
from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LevelRegistry",
    "CountField",
    "LogEntry",
    "Severity",
    "RegistryConfig",
    "get_default_registry",
    "set_default_registry",
]
