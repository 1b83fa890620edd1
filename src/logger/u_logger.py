from __future__ import annotations

import logging
from logging import Logger

from logger.utils import (
    configure_console_profile,
    configure_default_profile,
    get_logger_profile,
)

_configured_profile: str | None = None


def configure_logger() -> None:
    """
    Apply the logging profile named by ``INJECTION_LOGGER_PROFILE`` once per
    process. ``console`` logs to stdout only; any other value selects the
    default queued file profile.
    """
    global _configured_profile
    if _configured_profile is not None:
        return

    profile = get_logger_profile()
    if profile == "console":
        configure_console_profile()
    else:
        configure_default_profile()
    _configured_profile = profile


def get_logger(name: str = "") -> Logger:
    configure_logger()
    return logging.getLogger(name or None)
