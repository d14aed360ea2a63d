"""
Logging setup for the command-line runner and scripts.

Library modules only call logging.getLogger(__name__); the handler and
level are configured once here.
"""

import logging
from typing import Optional

from longhorn.core.config import get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    """Configure the root logger. Falls back to the level from settings."""
    if level is None:
        level = get_settings().effective_log_level
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)
