"""Process-wide logging setup for the signup service."""
# Standard library imports
import logging
import sys
from typing import Optional

# Local application imports
from .config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """
    Configure the root logger once per process.

    Args:
        level: Log level name; defaults to the LOG_LEVEL setting
    """
    level_name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format=LOG_FORMAT,
        stream=sys.stdout,
    )
    logging.getLogger(__name__).debug(f"Logging configured at {level_name}")
