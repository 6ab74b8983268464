"""Structured logging setup using structlog.

Console rendering for development, JSON lines for production.  The choice
follows ``APP_ENV`` unless ``json_output`` forces JSON.  Standard-library
``logging`` (uvicorn, httpx) is routed through the same processor chain.

Every upstream call is logged by the client as ``api_request``; with the
default INFO level that is the line to grep when checking cache behaviour.
"""

import logging
import os
import sys

import structlog

# Per-request chatter from the HTTP stack; only shown at DEBUG.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _select_renderer(json_output: bool) -> structlog.types.Processor:
    if json_output or os.environ.get("APP_ENV", "development") == "production":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())


def configure_logging(log_level: str = "INFO", json_output: bool = False) -> structlog.BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        log_level: Level name (DEBUG, INFO, WARNING, ERROR).
        json_output: Force JSON rendering regardless of ``APP_ENV``.

    Returns:
        The root structlog logger.
    """
    level = log_level.upper()
    renderer = _select_renderer(json_output)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                *shared_processors,
                renderer,
            ],
        )
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(level if level == "DEBUG" else "WARNING")

    return structlog.get_logger()


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a structlog logger bound with ``logger_name``.

    Configures logging with defaults on first use.
    """
    if not structlog.is_configured():
        configure_logging()

    return structlog.get_logger(logger_name=name)
