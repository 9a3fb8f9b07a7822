"""
Logging System for the Expression Engine

This module provides a centralized logger with verbosity levels so the
library stays quiet by default while the demo and callers can opt into detail.
"""

import logging
import sys
from typing import Optional
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for the expression engine"""
    SILENT = 0      # No output at all
    MINIMAL = 1     # Console handler only, no engine chatter
    MODERATE = 2    # Key milestones
    VERBOSE = 3     # Everything, including per-call debug details


class ExpressionLogger:
    """
    Centralized logger for the expression engine with level-aware filtering
    """

    def __init__(self, log_level: LogLevel = LogLevel.MINIMAL,
                 log_to_file: bool = False, log_file_path: Optional[str] = None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('symbolic_calculus')
        self.logger.setLevel(logging.DEBUG)
        self.logger.handlers.clear()  # Remove any existing handlers

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(sys.stdout)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"symbolic_calculus_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def milestone(self, message: str):
        """Important milestones - shown from moderate level onwards"""
        if self.should_log(LogLevel.MODERATE):
            self.logger.info(f"MILESTONE: {message}")

    def debug(self, message: str, *args):
        """Debug information - only in verbose mode; ``args`` are formatted lazily"""
        if self.should_log(LogLevel.VERBOSE):
            self.logger.debug("DEBUG: " + message, *args)


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MINIMAL,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None) -> ExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path
    )
    return _global_logger


def debug_enabled() -> bool:
    """True when debug messages would be emitted; guards costly message building"""
    return get_logger().should_log(LogLevel.VERBOSE)


def log_debug(message: str, *args):
    """Log debug message; %-style ``args`` are only rendered when it is emitted"""
    get_logger().debug(message, *args)
