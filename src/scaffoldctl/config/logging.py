"""Logging setup: stdlib loggers rendered by structlog on stderr.

Modules log with ``logging.getLogger(__name__)`` or ``structlog.get_logger``;
both end up in the single stderr handler installed here, as colored console
lines or, with ``--log-json``, one JSON object per line. stdout is left to
command output.
"""

from __future__ import annotations

import logging
import sys

import structlog

# Pinned at WARNING regardless of --verbose.
_NOISY = ("mcp", "httpx", "uvicorn", "uvicorn.access")

_PRE_CHAIN: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _stderr_handler(log_json: bool) -> logging.Handler:
    final: structlog.types.Processor
    if log_json:
        final = structlog.processors.JSONRenderer()
    else:
        final = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=list(_PRE_CHAIN),
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, final],
        )
    )
    return handler


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler, replacing any earlier one.

    ``scaffoldctl.*`` loggers emit DEBUG under *verbose*, WARNING otherwise.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.handlers[:] = [_stderr_handler(log_json)]
    root.setLevel(logging.WARNING)

    logging.getLogger("scaffoldctl").setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in _NOISY:
        logging.getLogger(name).setLevel(logging.WARNING)
