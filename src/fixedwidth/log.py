"""Logging for fixedwidth.

Loggers handed out by ``get_logger`` are structlog loggers wrapping a stdlib
``logging.Logger``. Until ``setup_logging`` (or the host application)
installs handlers they stay silent below WARNING, so importing fixedwidth
never prints anything.
"""

from __future__ import annotations

import logging
import logging.config
from collections import OrderedDict
from typing import Any

import structlog

_TIMESTAMPER = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", utc=False)

_PROCESSORS: list[Any] = [
    structlog.stdlib.filter_by_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    _TIMESTAMPER,
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
    structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
]


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to ``logging.getLogger(name)``."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        processors=_PROCESSORS,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=OrderedDict,
    )


def setup_logging(debug: bool = False, *, colors: bool = False) -> None:
    """Route fixedwidth log events to stderr.

    Args:
        debug: Emit DEBUG events (rejected calls, parsed arguments) when True,
            only WARNING and above otherwise
        colors: Colorize the console renderer
    """
    logging.config.dictConfig({
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": structlog.stdlib.ProcessorFormatter,
                "processor": structlog.dev.ConsoleRenderer(colors=colors),
                "foreign_pre_chain": [structlog.stdlib.add_log_level, _TIMESTAMPER],
            },
        },
        "handlers": {
            "stderr": {
                "level": "DEBUG",
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stderr",
            },
        },
        "loggers": {
            "fixedwidth": {
                "handlers": ["stderr"],
                "level": "DEBUG" if debug else "WARNING",
                "propagate": False,
            },
        },
    })
