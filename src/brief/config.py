"""
Runtime configuration for the brief package.

Settings are read from environment variables once, at import time:

- BRIEF_LOG_LEVEL: level applied by configure_logging() (default: WARNING,
  also used for unknown names)
- BRIEF_MAILBOX_RENDER: how a mailbox without a display name is rendered,
  either "angle" (<user@domain>, default) or "bare" (user@domain)
"""

import logging
import os
from typing import Optional

logger = logging.getLogger(__name__)

RENDER_ANGLE = 'angle'
RENDER_BARE = 'bare'
RENDER_MODES = (RENDER_ANGLE, RENDER_BARE)

DEFAULT_LOG_LEVEL = 'WARNING'

LOG_LEVEL = os.environ.get('BRIEF_LOG_LEVEL', DEFAULT_LOG_LEVEL).upper()
MAILBOX_RENDER = os.environ.get('BRIEF_MAILBOX_RENDER', RENDER_ANGLE).lower()

LOG_FORMAT = '%(levelname)s - %(message)s'


def mailbox_angle_brackets() -> bool:
    """
    Whether a mailbox without a display name is rendered inside angle brackets.

    Unknown BRIEF_MAILBOX_RENDER values fall back to "angle".

    Returns:
        bool: True for <user@domain>, False for user@domain
    """
    if MAILBOX_RENDER not in RENDER_MODES:
        logger.warning(
            f"Unknown BRIEF_MAILBOX_RENDER value '{MAILBOX_RENDER}', "
            f"falling back to '{RENDER_ANGLE}'"
        )
        return True
    return MAILBOX_RENDER == RENDER_ANGLE


def log_level(level: Optional[str] = None) -> int:
    """
    Resolve a log level name to its numeric value.

    Unknown names fall back to WARNING.

    Args:
        level: Log level name (default: BRIEF_LOG_LEVEL)

    Returns:
        int: Numeric logging level
    """
    name = (level or LOG_LEVEL).upper()
    value = logging.getLevelName(name)
    if not isinstance(value, int):
        logger.warning(
            f"Unknown BRIEF_LOG_LEVEL value '{name}', "
            f"falling back to '{DEFAULT_LOG_LEVEL}'"
        )
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return value


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """
    Attach a console handler to the package logger.

    A handler is only added when the logger has none, so calling this more
    than once is harmless.

    Args:
        level: Log level name (default: BRIEF_LOG_LEVEL); unknown names
            fall back to WARNING

    Returns:
        logging.Logger: The configured 'brief' logger
    """
    package_logger = logging.getLogger('brief')
    package_logger.setLevel(log_level(level))

    if not package_logger.handlers:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(console_handler)

    return package_logger
