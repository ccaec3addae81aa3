"""
Library logging setup.

Library modules log through the standard ``logging`` package under the
``vra_resource`` namespace and never configure handlers themselves.
Applications that want formatted output call :func:`setup_logging`, which
renders records with structlog's ProcessorFormatter.
"""

import logging
import sys
from typing import IO, Optional

import structlog

ROOT_LOGGER_NAME = "vra_resource"

_HANDLER_MARKER = "_vra_resource_handler"


def get_logger(name: str) -> logging.Logger:
    """Return a logger placed under the library's namespace."""
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    log_level: str = "INFO",
    log_format: str = "console",
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Set up structured logging for the library.

    :param log_level: Logging level (e.g., DEBUG, INFO, WARNING, ERROR, CRITICAL).
    :param log_format: "console" for key=value lines, "json" for one JSON object per line.
    :param stream: Stream to write to; defaults to stderr.
    :return: The configured library root logger.
    """
    if log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(formatter)
    setattr(handler, _HANDLER_MARKER, True)

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for existing in list(root.handlers):
        if getattr(existing, _HANDLER_MARKER, False):
            root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root.propagate = False
    return root
