"""
Centralized application-specific logging using Loguru.

Debug logging for sqlescape. The scanner logs every dispatched escape clause
(keyword, brace position, nesting depth and replacement), the settings module
logs where handlers were loaded from, and the parser facade and CLI log the
syntax and configuration errors they turn into results or messages.

All records go through `LOG`, which is silent when `beQuiet` is set.

Example:
    from sqlescape.lib.log import LOG
    LOG(f"Loaded {len(handlers)} handler(s) from {path}")

Environment:
- Set `ESQ_BEQUIET=True` to suppress detailed logging output.
"""

from loguru import logger
from typing import Any
import sys

# Create a distinct logger instance for the package
app_logger = logger.bind(app="SQLESCAPE")

logger_format = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> │ "
    "<level>{level: <5}</level> │ "
    "<yellow>{name: >28}</yellow>::"
    "<cyan>{function: <30}</cyan> @ "
    "<cyan>{line: <4}</cyan> ║ "
    "<level>{message}</level>"
)

app_logger.remove()  # Remove any default handlers
app_logger.add(sys.stderr, format=logger_format)


def LOG(*args: Any, **kwargs: Any) -> None:
    """
    Application-specific logging function.

    Logs at debug level unless `appsettings.beQuiet` is set.

    :param args: Positional arguments for the log message.
    :param kwargs: Keyword arguments for additional log metadata.
    """
    from sqlescape.config.settings import appsettings  # Ensure up-to-date settings

    if not appsettings.beQuiet:
        app_logger.opt(depth=1).debug(*args, **kwargs)
