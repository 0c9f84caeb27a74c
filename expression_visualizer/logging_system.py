"""
Logging System for Expression Processing

This module provides a centralized logging system with different verbosity levels
so the parser, the tree builder and the command line share one output channel.
"""

import logging
import sys
from typing import Optional, Dict, Any
from enum import Enum
from datetime import datetime


class LogLevel(Enum):
    """Enumeration of logging levels for expression processing"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only final results and critical info
    MODERATE = 2    # Results plus permissive-input warnings
    DETAILED = 3    # Intermediate pipeline stages
    VERBOSE = 4     # All information including debug details


class ExpressionLogger:
    """
    Centralized logger for expression processing with context-aware formatting
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream=None):
        self.log_level = log_level
        self.log_to_file = log_to_file

        self.logger = logging.getLogger('expression_visualizer')
        self.logger.setLevel(logging.DEBUG)
        for handler in self.logger.handlers:
            handler.close()
        self.logger.handlers.clear()  # Remove any existing handlers
        self.logger.propagate = False

        formatter = logging.Formatter(
            '%(asctime)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        if self.log_level != LogLevel.SILENT:
            console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
            console_handler.setFormatter(formatter)
            self.logger.addHandler(console_handler)

        if log_to_file:
            if log_file_path is None:
                log_file_path = f"expression_visualizer_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - errors that abort processing of one expression"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def stage(self, name: str, value: Any):
        """Intermediate pipeline output (postfix string, node count, ...)"""
        if self._should_log(LogLevel.DETAILED):
            self.logger.info(f"{name}: {value}")

    def warning(self, message: str):
        """Warnings - shown from moderate level onwards"""
        if self._should_log(LogLevel.MODERATE):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log final results summary"""
        if self.log_level == LogLevel.SILENT:
            return

        self.logger.info("=" * 60)
        self.logger.info("EXPRESSION RESULTS:")
        self.logger.info("=" * 60)

        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<30} {value:.6f}")
            else:
                self.logger.info(f"{key:.<30} {value}")


# Global logger instance
_global_logger: Optional[ExpressionLogger] = None


def get_logger() -> ExpressionLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ExpressionLogger()
    return _global_logger


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream=None) -> ExpressionLogger:
    """Configure the global logging system"""
    global _global_logger
    _global_logger = ExpressionLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


# Convenience functions for common operations
def log_stage(name: str, value: Any):
    """Log an intermediate pipeline stage"""
    get_logger().stage(name, value)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
