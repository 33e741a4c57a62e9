"""
Configuration module for CiteCheck.

Centralizes all configuration settings, environment variables, and defaults.
Settings can be overridden via environment variables or .env file.

Usage:
    from citecheck.config import config

    level = config.LOG_LEVEL
    if config.ENABLE_FILE_LOGGING:
        ...
"""

import os
from pathlib import Path
from dataclasses import dataclass, field

from dotenv import load_dotenv

# Load from project root .env file
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _get_env(key: str, default: str = "") -> str:
    """Get environment variable with default."""
    return os.environ.get(key, default)


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get boolean environment variable."""
    val = os.environ.get(key, "").lower()
    if val in ("true", "1", "yes", "on"):
        return True
    if val in ("false", "0", "no", "off"):
        return False
    return default


def _get_env_int(key: str, default: int = 0) -> int:
    """Get integer environment variable."""
    val = os.environ.get(key, "")
    try:
        return int(val) if val else default
    except ValueError:
        return default


OUTPUT_FORMATS = ('table', 'json', 'markdown')


@dataclass
class Config:
    """
    CiteCheck configuration settings.

    All settings can be overridden via environment variables.
    """

    # ==========================================================================
    # Logging Settings
    # ==========================================================================

    # Log level: DEBUG, INFO, WARNING, ERROR
    LOG_LEVEL: str = field(default_factory=lambda: _get_env(
        "CITECHECK_LOG_LEVEL", "INFO"
    ))

    VERBOSE: bool = field(default_factory=lambda: _get_env_bool(
        "CITECHECK_VERBOSE", False
    ))

    ENABLE_FILE_LOGGING: bool = field(default_factory=lambda: _get_env_bool(
        "CITECHECK_ENABLE_FILE_LOGGING", False
    ))

    LOG_ROTATION_SIZE_MB: int = field(default_factory=lambda: _get_env_int(
        "CITECHECK_LOG_ROTATION_SIZE_MB", 10
    ))

    LOG_RETENTION_COUNT: int = field(default_factory=lambda: _get_env_int(
        "CITECHECK_LOG_RETENTION_COUNT", 5
    ))

    # ==========================================================================
    # Report Settings
    # ==========================================================================

    # Maximum missing/unused items listed per report section
    REPORT_MAX_ITEMS: int = field(default_factory=lambda: _get_env_int(
        "CITECHECK_REPORT_MAX_ITEMS", 20
    ))

    # Console output: table, json or markdown
    DEFAULT_OUTPUT_FORMAT: str = field(default_factory=lambda: _get_env(
        "CITECHECK_OUTPUT_FORMAT", "table"
    ))

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        valid_levels = {'DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'}
        if self.LOG_LEVEL.upper() not in valid_levels:
            self.LOG_LEVEL = 'INFO'

        if self.LOG_ROTATION_SIZE_MB < 1:
            self.LOG_ROTATION_SIZE_MB = 10
        if self.LOG_RETENTION_COUNT < 1:
            self.LOG_RETENTION_COUNT = 5
        if self.REPORT_MAX_ITEMS < 1:
            self.REPORT_MAX_ITEMS = 20

        self.DEFAULT_OUTPUT_FORMAT = self.DEFAULT_OUTPUT_FORMAT.lower()
        if self.DEFAULT_OUTPUT_FORMAT not in OUTPUT_FORMATS:
            self.DEFAULT_OUTPUT_FORMAT = 'table'

    def to_dict(self) -> dict:
        """Convert config to dictionary for logging/debugging."""
        return {
            'LOG_LEVEL': self.LOG_LEVEL,
            'VERBOSE': self.VERBOSE,
            'ENABLE_FILE_LOGGING': self.ENABLE_FILE_LOGGING,
            'REPORT_MAX_ITEMS': self.REPORT_MAX_ITEMS,
            'DEFAULT_OUTPUT_FORMAT': self.DEFAULT_OUTPUT_FORMAT,
        }


# Global config instance
config = Config()


VERSION = "1.0.0"


__all__ = ['config', 'Config', 'OUTPUT_FORMATS', 'VERSION']
