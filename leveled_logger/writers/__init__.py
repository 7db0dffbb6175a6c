"""Writers module - Log output handlers"""

from leveled_logger.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
