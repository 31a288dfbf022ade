"""
Logging System for Forward-Mode Autodiff

Centralized leveled logging for the driver, CLI and validation tools.
The expression tree itself never logs.
"""

import logging
import sys
import time
from typing import Optional, Dict, Any
from enum import Enum


class LogLevel(Enum):
    """Enumeration of verbosity levels"""
    SILENT = 0      # No output except critical errors
    MINIMAL = 1     # Only final results and critical info
    MODERATE = 2    # Progress updates and key milestones
    DETAILED = 3    # Per-sample values
    VERBOSE = 4     # All information including debug details


class ForwardAutodiffLogger:
    """
    Centralized logger with verbosity filtering.

    Console output goes to stderr so stdout stays free for tabulated data.
    """

    def __init__(self, log_level: LogLevel = LogLevel.MODERATE,
                 log_to_file: bool = False, log_file_path: Optional[str] = None,
                 stream=None):
        self.log_level = log_level
        self.log_to_file = log_to_file
        self.start_time = time.time()

        self.logger = logging.getLogger('forward_autodiff')
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

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
                log_file_path = f"forward_autodiff_{time.strftime('%Y%m%d_%H%M%S')}.log"
            file_handler = logging.FileHandler(log_file_path)
            file_handler.setFormatter(formatter)
            self.logger.addHandler(file_handler)

    def _should_log(self, required_level: LogLevel) -> bool:
        """Check if message should be logged based on current log level"""
        return self.log_level.value >= required_level.value

    def critical(self, message: str):
        """Always logged - failures"""
        if self.log_level != LogLevel.SILENT:
            self.logger.error(f"CRITICAL: {message}")

    def info(self, message: str, required_level: LogLevel = LogLevel.MINIMAL):
        """General information with configurable level"""
        if self._should_log(required_level):
            self.logger.info(message)

    def milestone(self, message: str):
        """Important milestones - shown from moderate level onwards"""
        if self._should_log(LogLevel.MODERATE):
            elapsed = time.time() - self.start_time
            self.logger.info(f"MILESTONE: {message} ({elapsed:.2f}s)")

    def warning(self, message: str):
        """Warnings - shown from minimal level onwards"""
        if self._should_log(LogLevel.MINIMAL):
            self.logger.warning(message)

    def debug(self, message: str):
        """Debug information - only in verbose mode"""
        if self._should_log(LogLevel.VERBOSE):
            self.logger.debug(f"DEBUG: {message}")

    def result_summary(self, results: Dict[str, Any]):
        """Log a key/value summary block"""
        if not self._should_log(LogLevel.MINIMAL):
            return

        self.logger.info("=" * 40)
        for key, value in results.items():
            if isinstance(value, float):
                self.logger.info(f"{key:.<24} {value:.6g}")
            else:
                self.logger.info(f"{key:.<24} {value}")
        self.logger.info("=" * 40)

    def close(self):
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()


# Global logger instance
_global_logger: Optional[ForwardAutodiffLogger] = None


def get_logger() -> ForwardAutodiffLogger:
    """Get or create the global logger instance"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ForwardAutodiffLogger()
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global logging level"""
    global _global_logger
    if _global_logger is None:
        _global_logger = ForwardAutodiffLogger(log_level=level)
    else:
        _global_logger.log_level = level


def configure_logging(log_level: LogLevel = LogLevel.MODERATE,
                      log_to_file: bool = False,
                      log_file_path: Optional[str] = None,
                      stream=None) -> ForwardAutodiffLogger:
    """Configure the global logging system"""
    global _global_logger
    if _global_logger is not None:
        _global_logger.close()
    _global_logger = ForwardAutodiffLogger(
        log_level=log_level,
        log_to_file=log_to_file,
        log_file_path=log_file_path,
        stream=stream
    )
    return _global_logger


# Convenience functions for common operations
def log_info(message: str, level: LogLevel = LogLevel.MINIMAL):
    """Log info message at specified level"""
    get_logger().info(message, level)


def log_milestone(message: str):
    """Log milestone message"""
    get_logger().milestone(message)


def log_warning(message: str):
    """Log warning message"""
    get_logger().warning(message)


def log_debug(message: str):
    """Log debug message"""
    get_logger().debug(message)
