"""
Configuration constants for the scrollback package.

Each tunable can be overridden by setting an environment variable with the
same name before the package is imported.
"""

from __future__ import annotations

import logging
import os
from datetime import tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .logs.logger import logger


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Args:
        name: The name of the environment variable to read.
        default: The default integer value to return if parsing fails.

    Returns:
        The parsed integer value from the environment, or the default if unavailable.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            logger.log_event("config", "invalid_int", level=logging.WARNING, name=name, value=value, default=default)
    return default


def _get_env_zone(name: str) -> tzinfo | None:
    """Resolve an IANA zone name from the environment.

    ``None`` stands for the local zone of the running process, which is what
    an unset variable, an empty value or ``local`` select.
    """
    value = (os.getenv(name) or "").strip()
    if not value or value.lower() == "local":
        return None
    try:
        return ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        logger.log_event("config", "invalid_timezone", level=logging.WARNING, name=name, value=value)
        return None


# Zone that decoded timestamps are expressed in (None = process local zone)
DISPLAY_TIMEZONE = _get_env_zone("SCROLLBACK_TIMEZONE")

# Upper bound on validation errors copied into a DecodeError's data
MAX_DECODE_ERRORS = max(1, _get_env_int("SCROLLBACK_MAX_DECODE_ERRORS", 10))

# Numeric replies are 16-bit unsigned on the wire
RESPONSE_CODE_MAX = 65535
