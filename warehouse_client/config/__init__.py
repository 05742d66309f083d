"""
Configuration module.

Handles environment variables, connection settings and logging setup.
"""

from warehouse_client.config.config import (
    DATA_WAREHOUSE_URL,
    DATA_WAREHOUSE_API_KEY,
    DATA_WAREHOUSE_TIMEOUT,
    DATA_WAREHOUSE_ESCAPE_PATHS,
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    DEBUG,
    LOG_LEVEL,
    LOG_FORMAT,
    validate_config,
    config_summary,
    setup_logging,
)

__all__ = [
    "DATA_WAREHOUSE_URL",
    "DATA_WAREHOUSE_API_KEY",
    "DATA_WAREHOUSE_TIMEOUT",
    "DATA_WAREHOUSE_ESCAPE_PATHS",
    "DEFAULT_PAGE",
    "DEFAULT_PAGE_SIZE",
    "DEBUG",
    "LOG_LEVEL",
    "LOG_FORMAT",
    "validate_config",
    "config_summary",
    "setup_logging",
]
