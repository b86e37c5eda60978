"""Environment-driven settings."""

import logging
import os
from pathlib import Path
from typing import Optional

DEFAULT_MAX_BYTES = 10 * 1024 * 1024
DEFAULT_LOG_LEVEL = "WARNING"


def get_base_dir() -> Optional[Path]:
    """Directory path-based tool inputs must stay inside (SECTIONCOUNT_BASE_DIR)."""
    value = os.environ.get("SECTIONCOUNT_BASE_DIR", "").strip()
    if not value:
        return None
    return Path(value).expanduser().resolve()


def get_max_bytes() -> int:
    """Largest file a tool will read (SECTIONCOUNT_MAX_BYTES)."""
    value = os.environ.get("SECTIONCOUNT_MAX_BYTES", "").strip()
    if not value:
        return DEFAULT_MAX_BYTES
    try:
        return int(value)
    except ValueError:
        logging.getLogger(__name__).warning(
            "Invalid SECTIONCOUNT_MAX_BYTES %r, using %d", value, DEFAULT_MAX_BYTES
        )
        return DEFAULT_MAX_BYTES


def get_log_level() -> str:
    return os.environ.get("SECTIONCOUNT_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: Optional[str] = None) -> None:
    """Send log records to stderr. stdout is reserved for output."""
    logging.basicConfig(
        level=level or get_log_level(),
        format="%(levelname)s %(name)s: %(message)s",
    )
