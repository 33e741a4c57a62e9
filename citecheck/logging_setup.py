"""
Logging configuration for CiteCheck.

Provides centralized logging setup with:
- Console output (always enabled)
- File logging with rotation (configurable)
- Separate error log for critical issues
"""

import sys
from datetime import datetime
from pathlib import Path
from typing import Optional
from loguru import logger

# Determine log directory
LOG_DIR = Path(__file__).parent.parent / '.data' / 'logs'

# Flag to track if logging is already configured
_logging_configured = False


def setup_logging(
    log_level: str = "INFO",
    enable_file_logging: bool = False,
    rotation_size_mb: int = 10,
    retention_count: int = 5,
    verbose: bool = False,
    log_dir: Optional[Path] = None,
):
    """
    Configure logging for CiteCheck.

    Args:
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        enable_file_logging: Whether to write logs to files
        rotation_size_mb: Size in MB before rotating log file
        retention_count: Number of rotated log files to keep
        verbose: Enable verbose/debug output
        log_dir: Override for the log directory
    """
    global _logging_configured

    if _logging_configured:
        return

    # Remove default handler
    logger.remove()

    effective_level = "DEBUG" if verbose else log_level.upper()

    console_format = (
        "<green>{time:HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
        "<level>{message}</level>"
    )
    logger.add(
        sys.stderr,
        format=console_format,
        level=effective_level,
        colorize=True,
        backtrace=True,
        diagnose=False,
    )

    if enable_file_logging:
        directory = log_dir or LOG_DIR
        directory.mkdir(parents=True, exist_ok=True)

        file_format = (
            "{time:YYYY-MM-DD HH:mm:ss.SSS} | "
            "{level: <8} | "
            "{name}:{function}:{line} | "
            "{message}"
        )

        logger.add(
            str(directory / "citecheck.log"),
            format=file_format,
            level="DEBUG",  # Always capture DEBUG to file
            rotation=f"{rotation_size_mb} MB",
            retention=retention_count,
            compression="zip",
            backtrace=True,
            enqueue=True,
        )

        logger.add(
            str(directory / "errors.log"),
            format=file_format,
            level="ERROR",
            rotation=f"{rotation_size_mb} MB",
            retention=retention_count,
            compression="zip",
            backtrace=True,
            enqueue=True,
        )

        logger.info(f"File logging enabled. Log directory: {directory}")

    _logging_configured = True
    logger.debug(f"CiteCheck logging initialized (level={effective_level})")


def reset_logging():
    """Allow setup_logging to run again with new settings."""
    global _logging_configured
    _logging_configured = False


def log_document_operation(operation: str, file_path: str, details: dict = None):
    """
    Log a document operation with structured data.

    Args:
        operation: Type of operation (read, analyze, save)
        file_path: Path to the document
        details: Additional details as a dictionary
    """
    details = dict(details or {})
    details['timestamp'] = datetime.now().isoformat()
    details['file_path'] = file_path
    details['operation'] = operation

    logger.bind(**details).info(f"Document {operation}: {file_path} | {details}")


def init_from_config(verbose: Optional[bool] = None):
    """Initialize logging from config settings."""
    from .config import config
    setup_logging(
        log_level=config.LOG_LEVEL,
        enable_file_logging=config.ENABLE_FILE_LOGGING,
        rotation_size_mb=config.LOG_ROTATION_SIZE_MB,
        retention_count=config.LOG_RETENTION_COUNT,
        verbose=config.VERBOSE if verbose is None else verbose,
    )
    logger.debug(f"Configuration: {config.to_dict()}")


__all__ = [
    'setup_logging',
    'reset_logging',
    'log_document_operation',
    'init_from_config',
]
