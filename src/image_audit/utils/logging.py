"""Logging setup for image-audit.

Everything is logged under the ``image_audit`` namespace to stderr, so
reports on stdout can be piped into other tools untouched.
"""

import logging
import sys
from typing import Any

ROOT_LOGGER = "image_audit"

# Client libraries that log every request at INFO or DEBUG.
NOISY_LOGGERS = ("httpx", "httpcore", "openstack", "keystoneauth")


class ContextFormatter(logging.Formatter):
    """Appends the record's context fields as ``key=value`` pairs."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not context:
            return message
        return message + " " + " ".join(f"{key}={value}" for key, value in context.items())


def configure_logging(level: str = "WARNING", structured: bool = False) -> None:
    """Configure the image_audit logger.

    Calling this again replaces the previous handler, so the CLI callback
    can run once per invocation.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        structured: Include timestamp and logger name in each line
    """
    if structured:
        fmt = "%(asctime)s %(levelname)s %(name)s %(message)s"
    else:
        fmt = "%(levelname)s: %(message)s"

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ContextFormatter(fmt))

    numeric = getattr(logging, level.upper())
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(numeric)
    logger.handlers = [handler]
    logger.propagate = False

    # Only surface client library chatter when debugging.
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if numeric <= logging.DEBUG else logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the image_audit namespace."""
    if name != ROOT_LOGGER and not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


class ContextAdapter(logging.LoggerAdapter):
    """Attaches fixed context (such as an image id) to every record."""

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        extra = dict(kwargs.get("extra") or {})
        extra["context"] = {**self.extra, **extra.get("context", {})}
        kwargs["extra"] = extra
        return msg, kwargs


def get_logger_with_context(name: str, **context: Any) -> ContextAdapter:
    """Get a logger whose messages carry the given context fields."""
    return ContextAdapter(get_logger(name), context)
