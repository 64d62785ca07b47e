"""Structured logging with structlog.

Applications call configure_logging() once at startup; library modules only
use get_logger() and never configure logging themselves.
"""

import logging
import sys
from functools import lru_cache
from typing import Optional

import structlog

from bikecatalog.settings import CatalogSettings, get_settings


def configure_logging(settings: Optional[CatalogSettings] = None) -> None:
    settings = settings or get_settings()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, settings.log_level),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # cached loggers would ignore later reconfiguration
        cache_logger_on_first_use=False,
    )

    if settings.log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty())
    formatter = structlog.stdlib.ProcessorFormatter(processor=renderer)

    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


@lru_cache(maxsize=100)
def get_logger(name: str):
    return structlog.get_logger(name)
