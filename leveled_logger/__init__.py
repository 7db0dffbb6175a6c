"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Leveled Logger - in-process leveled logging with a logger registry

Loggers format and store lines gated by a shared severity threshold;
the registry aggregates errors, warnings and messages across loggers.
"""

__version__ = "0.1.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from leveled_logger.core.logger import Logger
from leveled_logger.core.logger_builder import LoggerBuilder
from leveled_logger.core.log_entry import LogEntry
from leveled_logger.core.log_level import Severity
from leveled_logger.core.registry_config import RegistryConfig
from leveled_logger.core.level_registry import (
    LevelRegistry,
    CountField,
    get_default_registry,
    set_default_registry,
)

# Import submodules (not all classes by default)
from leveled_logger import filters
from leveled_logger import formatters
from leveled_logger import writers

__all__ = [
    "Logger",
    "LoggerBuilder",
    "LogEntry",
    "Severity",
    "RegistryConfig",
    "LevelRegistry",
    "CountField",
    "get_default_registry",
    "set_default_registry",
    "filters",
    "formatters",
    "writers",
]
