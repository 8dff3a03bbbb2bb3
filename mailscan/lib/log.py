"""
Centralized application-specific logging using Loguru.

This module provides a function-based logging mechanism (`LOG`) that dynamically
respects the `beQuiet` flag from application settings.

Usage:
- Use `LOG` for scanner and CLI debug logging.
- The `beQuiet` flag controls whether logs are displayed.

Example:
    from mailscan.lib.log import LOG
    LOG("Split address list into 3 entries")

Environment:
- Set `MSC_BEQUIET=True` to suppress detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Distinct logger instance for mailscan records
app_logger = logger.bind(app="MAILSCAN")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >32}</yellow>::"
    "<cyan>{function: <24}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Emits a debug record unless `appsettings.beQuiet` is set. Settings are
    looked up on every call so that environment overrides applied after
    import are respected.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from mailscan.config.settings import appsettings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
