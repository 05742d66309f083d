"""
Configuration module for the Data Warehouse client.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of warehouse_client/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


def _env_timeout(name: str) -> Optional[float]:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return float(raw)


# =============================================================================
# Data Warehouse Connection
# =============================================================================

# Base URL of the Data Warehouse service, e.g. "https://warehouse.example.com"
# Endpoint paths ("/api/v1/articles", "/health") are appended to it verbatim
DATA_WAREHOUSE_URL: str = os.getenv("DATA_WAREHOUSE_URL", "")

# Bearer token sent in the Authorization header of every request
DATA_WAREHOUSE_API_KEY: str = os.getenv("DATA_WAREHOUSE_API_KEY", "")

# HTTP request timeout in seconds
# Default: unset - the call blocks until the transport gives up on its own
DATA_WAREHOUSE_TIMEOUT: Optional[float] = _env_timeout("DATA_WAREHOUSE_TIMEOUT")

# Percent-encode ids and tags before putting them in the URL path
# Set to "false" only for servers that expect raw segments
DATA_WAREHOUSE_ESCAPE_PATHS: bool = _env_bool("DATA_WAREHOUSE_ESCAPE_PATHS", "true")


# =============================================================================
# Pagination
# =============================================================================

# The service counts pages from 1 and accepts 1-100 items per page.
# Neither bound is enforced client-side.
DEFAULT_PAGE: int = 1
DEFAULT_PAGE_SIZE: int = 20


# =============================================================================
# Logging
# =============================================================================

# Enable debug mode for verbose logging
DEBUG: bool = _env_bool("DEBUG", "false")

LOG_LEVEL: str = os.getenv("LOG_LEVEL", "DEBUG" if DEBUG else "INFO").upper()

LOG_FORMAT: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"


# =============================================================================
# Helper Functions
# =============================================================================

def validate_config() -> list[str]:
    """
    Validate that the connection settings are usable.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if not DATA_WAREHOUSE_URL:
        errors.append("DATA_WAREHOUSE_URL is required")
    elif not DATA_WAREHOUSE_URL.startswith(("http://", "https://")):
        errors.append(
            f"DATA_WAREHOUSE_URL must start with http:// or https://, got {DATA_WAREHOUSE_URL}"
        )

    if not DATA_WAREHOUSE_API_KEY:
        errors.append("DATA_WAREHOUSE_API_KEY is required")

    if DATA_WAREHOUSE_TIMEOUT is not None and DATA_WAREHOUSE_TIMEOUT <= 0:
        errors.append("DATA_WAREHOUSE_TIMEOUT must be a positive number of seconds")

    return errors


def config_summary() -> dict:
    """Return a summary of current configuration (safe for logs, no secrets)."""
    return {
        "DATA_WAREHOUSE_URL": DATA_WAREHOUSE_URL or "(not set)",
        "DATA_WAREHOUSE_API_KEY": "***" if DATA_WAREHOUSE_API_KEY else "(not set)",
        "DATA_WAREHOUSE_TIMEOUT": (
            f"{DATA_WAREHOUSE_TIMEOUT}s" if DATA_WAREHOUSE_TIMEOUT is not None else "(none)"
        ),
        "DATA_WAREHOUSE_ESCAPE_PATHS": DATA_WAREHOUSE_ESCAPE_PATHS,
        "DEBUG": DEBUG,
        "LOG_LEVEL": LOG_LEVEL,
    }


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    Calling it again only updates the level; handlers are never stacked.

    Args:
        level: Level name such as "DEBUG". Defaults to LOG_LEVEL.

    Returns:
        The "warehouse_client" logger.
    """
    level_value = getattr(logging, (level or LOG_LEVEL).upper())

    logger = logging.getLogger("warehouse_client")
    logger.setLevel(level_value)

    console_handler = next(
        (h for h in logger.handlers if getattr(h, "_warehouse_console", False)),
        None,
    )
    if console_handler is None:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
        console_handler._warehouse_console = True
        logger.addHandler(console_handler)
    console_handler.setLevel(level_value)

    return logger
