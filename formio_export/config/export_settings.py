"""
Export settings and defaults.

Centralized defaults for renderer adapters. Values that depend on the
deployment are read from the environment.
"""
import logging
import os

logger = logging.getLogger(__name__)


def env_int(name: str, default: int) -> int:
    """Integer environment override; malformed values fall back to default."""
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Ignoring non-integer {name}={raw!r}, using {default}")
        return default


# Filenames
DEFAULT_FILENAME_PREFIX = "export"
"""Prefix for generated export filenames (export-<random>.pdf)"""

RANDOM_SUFFIX_LENGTH = 7
"""Length of the random suffix appended to generated filenames"""

# Gotenberg
GOTENBERG_URL = os.getenv("GOTENBERG_URL", "http://localhost:3030")
"""Base URL of the Gotenberg service used for HTML to PDF conversion"""

GOTENBERG_TIMEOUT_SECONDS = env_int("FORMIO_EXPORT_GOTENBERG_TIMEOUT", 120)
"""Request timeout for Gotenberg conversions"""

GOTENBERG_HEALTH_TIMEOUT_SECONDS = 5
"""Request timeout for the Gotenberg health probe"""

# PDF page defaults (inches, as Gotenberg expects)
DEFAULT_PAPER_WIDTH = "8.5"
DEFAULT_PAPER_HEIGHT = "11"
DEFAULT_MARGIN = "0.5"

# XLSX
DEFAULT_SHEET_NAME = "Submissions"
"""Worksheet title used when the config names none"""

MAX_SHEET_NAME_LENGTH = 31
"""Excel limit on worksheet title length"""
