"""Structured logging setup (structlog over the stdlib logging module)."""

from __future__ import annotations

import logging
import sys

import structlog

from .config import Config, get_config

_configured = False


def configure_logging(config: Config | None = None, *, force: bool = False) -> None:
    """Configure structlog once per process; later calls are no-ops unless forced."""
    global _configured
    if _configured and not force:
        return
    cfg = config or get_config()
    level = getattr(logging, cfg.log_level, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level, force=force)

    renderer = structlog.processors.JSONRenderer() if cfg.log_json else structlog.dev.ConsoleRenderer(colors=False)
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )
    _configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Logger bound to a module name; configure_logging decides the output."""
    return structlog.get_logger(name)
