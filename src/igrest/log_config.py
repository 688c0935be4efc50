# igrest/log_config.py
"""Logging configuration for the igrest library using Loguru.

`configure_logging` installs a single sink whose records are tagged with the
library name and scrubbed of bearer tokens before formatting, so an access
token interpolated into a message (for example by a caller logging a request)
is never written out.
"""

import re
import sys

from loguru import logger

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<magenta>igrest</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

_BEARER_TOKEN = re.compile(r"(Bearer\s+)[^\s'\",}]+", re.IGNORECASE)
REDACTED = "***"


def redact_tokens(record) -> None:
    """Loguru patcher masking `Bearer <token>` values in the record's message."""
    record["message"] = _BEARER_TOKEN.sub(rf"\g<1>{REDACTED}", record["message"])


def configure_logging(level: str = "INFO", sink=sys.stderr):
    """
    Configures Loguru logger for igrest.

    Removes existing handlers, installs the bearer-token patcher and adds one
    handler with the specified level and sink.

    Args:
        level: The minimum logging level (e.g., "DEBUG", "INFO", "WARNING").
        sink: The output sink (e.g., sys.stderr, "file.log").
    """
    logger.remove()
    logger.configure(patcher=redact_tokens)
    logger.add(
        sink,
        level=level.upper(),
        format=LOG_FORMAT,
        colorize=sink is sys.stderr,
        backtrace=True,
        # Variable values in tracebacks could expose credentials
        diagnose=False,
    )
    logger.debug(f"igrest logging configured: level={level.upper()}, sink={sink}")
