"""Structured logging for variantkit.

Events are produced with structlog and handed to the stdlib logger named
``variantkit``. configure_logging() gives that logger a handler of its own;
the root logger, and any handler the host application installed on it, are
left untouched. Before that, events propagate to whatever logging the host
set up, and a NullHandler keeps them silent when there is none.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

__all__ = [
    'LOGGER_NAME',
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'variantkit'

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

# The handler added by configure_logging(), replaced on reconfiguration.
_handler: logging.Handler | None = None


def _timestamped_chain() -> list[Any]:
    """Processors applied both to structlog events and to plain stdlib records."""
    import structlog

    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
    ]


def _build_formatter(json_output: bool) -> logging.Formatter:
    import structlog

    if json_output:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_timestamped_chain(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(
    level: str = 'INFO',
    *,
    json_output: bool = True,
) -> logging.Logger:
    """Send variantkit's events to stderr at the given level.

    Calling it again swaps the previous handler for a new one.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON logs. If False, use console output.

    Returns:
        The ``variantkit`` stdlib logger.
    """
    import structlog

    global _handler  # noqa: PLW0603

    structlog.configure(
        processors=[
            *_timestamped_chain(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    library_logger = logging.getLogger(LOGGER_NAME)
    if _handler is not None:
        library_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(_build_formatter(json_output))
    library_logger.addHandler(_handler)
    library_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    # Records end here; host handlers on the root logger would print them twice.
    library_logger.propagate = False
    return library_logger


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger bound to the stdlib logger ``name`` (default ``variantkit``).

    Processors come from the current structlog configuration, so
    ``structlog.testing.capture_logs`` sees these events too.
    """
    import structlog

    return structlog.wrap_logger(logging.getLogger(name or LOGGER_NAME))
