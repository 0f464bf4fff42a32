from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

import structlog


def configure_logging(level: Union[int, str] = "WARNING", stream: Optional[TextIO] = None) -> None:
    """
    Route worldcal's structlog events to ``stream`` at ``level`` and above.

    The library never calls this itself; entry points (the CLI, diagnostics)
    do, once, before doing any work.
    """
    if isinstance(level, str):
        numeric = logging.getLevelName(level.upper())
        if not isinstance(numeric, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = numeric
    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )
