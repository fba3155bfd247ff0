# utils/logger.py
# This file is part of Modus - LTL-scheduled trace modification
#
# Logging utility for modification exploration with configurable levels

import logging
import sys
from enum import Enum
from typing import Optional


class LogLevel(Enum):
    """Log levels for modification exploration."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR


class ExplorerLogger:
    """Centralized logger for the exploration engine with structured output."""

    def __init__(self, name: str = "modus", level: LogLevel = LogLevel.INFO):
        """Initialize the exploration logger.

        Args:
            name: Logger name
            level: Default logging level
        """
        self.logger = logging.getLogger(name)
        self.logger.setLevel(level.value)

        # Remove existing handlers to avoid duplicates
        self.logger.handlers.clear()

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level.value)
        console_handler.setFormatter(ExplorerFormatter())

        self.logger.addHandler(console_handler)
        self.logger.propagate = False

    def set_level(self, level: LogLevel):
        """Change the logging level."""
        self.logger.setLevel(level.value)
        for handler in self.logger.handlers:
            handler.setLevel(level.value)

    def is_debug(self) -> bool:
        """True when DEBUG records would be emitted."""
        return self.logger.isEnabledFor(logging.DEBUG)

    # Core logging methods
    def debug(self, message: str, **kwargs):
        """Log debug message (detailed internal state)."""
        self.logger.debug(message, **kwargs)

    def info(self, message: str, **kwargs):
        """Log info message (general progress)."""
        self.logger.info(message, **kwargs)

    def warning(self, message: str, **kwargs):
        """Log warning message (unexpected but recoverable)."""
        self.logger.warning(message, **kwargs)

    def error(self, message: str, **kwargs):
        """Log error message (serious problems)."""
        self.logger.error(message, **kwargs)

    # Specialized methods for exploration events
    def exploration_start(self, modification_type: str, formulas: str):
        """Log the start of a run."""
        self.info("=== Starting Exploration ===")
        self.info(f"Modification type: {modification_type}")
        self.info(f"Initial formulas: {formulas}")

    def alternatives_computed(self, operation: str, count: int, formulas: str):
        """Log the alternatives offered at one step."""
        self.debug(f"    🔀 {operation}: {count} alternative(s) for {formulas}")

    def modification_applied(self, operation: str, modification: str):
        """Log a modification that was accepted by the domain."""
        self.debug(f"      ✏️  {modification} applied to {operation}")

    def branch_pruned(self, reason: str, detail: str = ""):
        """Log a pruned branch."""
        detail_str = f" ({detail})" if detail else ""
        self.debug(f"      ✂️  pruned: {reason}{detail_str}")

    def scope_opened(self, formula: str, depth: int):
        """Log a formula scope being pushed."""
        self.debug(f"  ▶ scope {depth} opened: {formula}")

    def scope_closed(self, formula: str, depth: int, finished: bool):
        """Log a formula scope being popped."""
        status = "finished" if finished else "UNFINISHED"
        self.debug(f"  ◀ scope {depth} closed with {formula}: {status}")

    def exploration_summary(self, survivors: int, pruned: int):
        """Log the final branch counts."""
        self.info(f"\n>>> {survivors} surviving branch(es), {pruned} pruned <<<")


class ExplorerFormatter(logging.Formatter):
    """Custom formatter for exploration logging with clean output."""

    def format(self, record):
        # For INFO level and above, show message only (clean output)
        if record.levelno >= logging.INFO:
            return record.getMessage()

        if record.levelno == logging.DEBUG:
            return f"[DEBUG] {record.getMessage()}"

        return f"[{record.levelname}] {record.getMessage()}"


# Global logger instance
_global_logger: Optional[ExplorerLogger] = None


def get_logger(name: str = "modus") -> ExplorerLogger:
    """Get or create the global exploration logger instance.

    Every module shares one logger; ``name`` only matters on first use.

    Args:
        name: Logger name (default: "modus")

    Returns:
        ExplorerLogger instance
    """
    global _global_logger
    if _global_logger is None:
        _global_logger = ExplorerLogger(name)
    return _global_logger


def set_log_level(level: LogLevel):
    """Set the global log level.

    Args:
        level: New log level
    """
    get_logger().set_level(level)


def configure_logging(verbose: bool = False, debug: bool = False):
    """Configure logging based on command line flags.

    Args:
        verbose: Enable verbose (INFO) output
        debug: Enable debug output (overrides verbose)
    """
    if debug:
        set_log_level(LogLevel.DEBUG)
    elif verbose:
        set_log_level(LogLevel.INFO)
    else:
        set_log_level(LogLevel.WARNING)
