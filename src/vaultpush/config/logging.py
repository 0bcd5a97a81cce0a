"""Route vaultpush's stdlib loggers through a structlog formatter on stderr.

Modules log with ``logging.getLogger(__name__)``. The handler installed
here renders those records either as aligned console lines or, with
``--log-json``, as one JSON object per line. Copy failures are logged in
full here; the user-facing message carries only the category.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "vaultpush"


def _renderer(log_json: bool) -> list[structlog.types.Processor]:
    if log_json:
        return [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    return [structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())]


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Install the stderr handler on the root logger, replacing any other.

    Third-party loggers stay at WARNING. ``vaultpush.*`` drops to DEBUG
    when *verbose* is set.
    """
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
        ],
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *_renderer(log_json),
        ],
    )
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)
    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
