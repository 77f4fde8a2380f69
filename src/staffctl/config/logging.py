"""structlog configuration for staffctl.

All log output goes to stderr through one stdlib handler, so records from
``logging.getLogger(__name__)`` and from structlog loggers share a format:

- console (default): key=value lines, colored when stderr is a terminal
- JSON (``--log-json``): one object per line, non-ASCII kept as-is

stdout stays reserved for prompts, tables, and command results.
"""

from __future__ import annotations

import logging
import sys

import structlog

PACKAGE_LOGGER = "staffctl"

# Third-party loggers held at WARNING regardless of --verbose.
QUIET_LOGGERS = ("mcp", "httpx", "uvicorn.access")


def _pre_chain() -> list[structlog.types.Processor]:
    """Processors applied to both structlog and foreign stdlib records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer(ensure_ascii=False)
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route structlog and stdlib logging to a single stderr handler.

    Args:
        verbose: ``staffctl.*`` loggers emit DEBUG and up; otherwise WARNING.
        log_json: Render JSON lines instead of console lines.

    Calling this again replaces the previous handler, so each CLI invocation
    starts from a clean root logger.
    """
    pre_chain = _pre_chain()
    structlog.configure(
        processors=[*pre_chain, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                _renderer(log_json),
            ],
        )
    )

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
