"""Structured diagnostic logging for Sprig using structlog.

Diagnostics are routed through the stdlib ``logging`` module and written to
stderr, so command output on stdout is never interleaved with log lines.
Until :func:`configure_logging` is called, only warnings and above reach
stderr (through logging's last-resort handler).
"""

import logging
import os
import sys

import structlog

_configured = False


def _level_from(name) -> int:
    if isinstance(name, int):
        return name
    return getattr(logging, str(name).upper(), logging.WARNING)


structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
    ],
    context_class=dict,
    logger_factory=structlog.stdlib.LoggerFactory(),
    wrapper_class=structlog.stdlib.BoundLogger,
    cache_logger_on_first_use=True,
)


def configure_logging(level=None) -> None:
    """
    Attach a stderr handler to the ``sprig`` logger.

    Args:
        level: Level name or number. Falls back to $SPRIG_LOG_LEVEL, then WARNING.
    """
    global _configured

    if level is None:
        level = os.environ.get('SPRIG_LOG_LEVEL', 'WARNING')

    root = logging.getLogger('sprig')
    root.setLevel(_level_from(level))

    if _configured:
        return

    colors = sys.stderr.isatty()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=structlog.dev.ConsoleRenderer(colors=colors),
            foreign_pre_chain=[
                structlog.stdlib.add_logger_name,
                structlog.stdlib.add_log_level,
                structlog.processors.TimeStamper(fmt="iso"),
            ],
        )
    )
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: str):
    """Return a structlog logger named ``sprig.<name>``."""
    return structlog.get_logger(f"sprig.{name}")
