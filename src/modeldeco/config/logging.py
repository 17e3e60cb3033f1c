"""structlog output for the ``modeldeco`` logger tree.

modeldeco is embedded in other applications, so configuration stays on
the ``modeldeco`` logger: it owns one handler there, stops propagation to
the root logger and leaves the root handlers and level alone.

Two output modes:
- Human (default): console lines to stderr, colored on a tty
- JSON (log_json=True): one JSON object per line on stderr
"""

from __future__ import annotations

import logging
import sys

import structlog

LOGGER_NAME = "modeldeco"
HANDLER_NAME = "modeldeco.stderr"


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> logging.Handler:
    """Route ``modeldeco`` log records through a structlog formatter.

    Calling this again swaps the handler installed by the previous call;
    handlers added by anyone else stay attached.

    Args:
        verbose: DEBUG for the ``modeldeco`` tree. When False, WARNING+.
        log_json: JSON renderer instead of the console renderer.

    Returns:
        The handler now attached to the ``modeldeco`` logger.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    structlog.configure(
        processors=[
            *pre_chain,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    deco_logger = logging.getLogger(LOGGER_NAME)
    for existing in list(deco_logger.handlers):
        if existing.get_name() == HANDLER_NAME:
            deco_logger.removeHandler(existing)
            existing.close()
    deco_logger.addHandler(handler)
    deco_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    deco_logger.propagate = False
    return handler
