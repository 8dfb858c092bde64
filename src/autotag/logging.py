"""Structured logging for autotag.

Configures `structlog <https://www.structlog.org/>`_ with two output modes:

- **Console** (default): human-readable output, colored on a TTY.
- **JSON** (``--json-log``): one JSON object per line.

Both modes write to stderr so stdout stays clean for the computed
version (e.g. ``TAG=$(autotag next)``). Until configure_logging() is
called, events go to the stdlib ``autotag`` logger, which only has a
NullHandler, so importing the library prints nothing.

Usage::

    from autotag.logging import configure_logging, get_logger

    configure_logging(verbose=True)
    log = get_logger()
    log.info("resolved next version", version="1.3.0")
"""

from __future__ import annotations

import logging
import sys

import structlog

_NULL_HANDLER = logging.NullHandler()


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Configure structlog for autotag.

    Should be called once at startup, before any logging calls.

    Args:
        verbose: Enable debug-level output.
        quiet: Only show warnings and errors.
        json_log: Use JSON output instead of console output.
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
        force=True,
    )

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if json_log:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = "autotag") -> structlog.stdlib.BoundLogger:
    """Return a bound structlog logger.

    Args:
        name: Logger name, used for filtering and identification.

    Returns:
        A structlog BoundLogger.
    """
    return structlog.get_logger(name)


def use_library_defaults() -> None:
    """Route autotag logging through the stdlib without emitting anything.

    Applied at import time unless structlog is already configured, so
    library callers that never call configure_logging() get no output
    on stdout or stderr. Their own stdlib handlers still see events.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.KeyValueRenderer(key_order=["event"]),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )
    logging.getLogger("autotag").addHandler(_NULL_HANDLER)


if not structlog.is_configured():
    use_library_defaults()


__all__ = [
    "configure_logging",
    "get_logger",
    "use_library_defaults",
]
