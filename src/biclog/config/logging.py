"""structlog setup for one biclog invocation.

Log events go to stderr so they never mix with listings on stdout.
``-v`` lowers the ``biclog`` logger to DEBUG; ``--log-json`` switches
the renderer to JSON lines. The data file of the invocation is bound
once and appears on every event.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    data_file: Path | None = None,
) -> None:
    """Route structlog and stdlib logging through one stderr handler.

    Safe to call repeatedly: the root handler and the bound context are
    replaced, not added to.
    """
    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]

    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared_processors, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    logging.getLogger("biclog").setLevel(logging.DEBUG if verbose else logging.WARNING)
    # SQL echo is never wanted, even with -v
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)

    structlog.contextvars.clear_contextvars()
    if data_file is not None:
        structlog.contextvars.bind_contextvars(data_file=str(data_file))
