"""Logging for deobf.

Modules log through ``logging.getLogger(__name__)``. This module renders
those records with structlog on stderr, as console lines or as JSON
(``--log-json``). Records logged inside :func:`schema_context` carry the
schema being loaded, so bootstrap and merge messages can be told apart
when several schemas are combined.
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractContextManager
from typing import TextIO

import structlog
from structlog.types import Processor

_HANDLER_NAME = "deobf"


def schema_context(schema: str) -> AbstractContextManager[None]:
    """Tag every record logged in the block with ``schema=<schema>``."""
    return structlog.contextvars.bound_contextvars(schema=schema)


def _pre_chain() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _handler(log_json: bool, stream: TextIO) -> logging.Handler:
    if log_json:
        renderer: Processor = structlog.processors.JSONRenderer(sort_keys=True)
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=stream.isatty())
    handler = logging.StreamHandler(stream)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            # `extra=` fields on stdlib records become event keys.
            foreign_pre_chain=[structlog.stdlib.ExtraAdder(), *_pre_chain()],
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    return handler


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route ``deobf`` records (and structlog loggers) to *stream*.

    Calling it again swaps the previous deobf handler; handlers installed
    by the host application are left alone.

    Args:
        verbose: Show DEBUG records from ``deobf.*`` loggers.
        log_json: One JSON object per line instead of console output.
        stream: Destination, stderr when omitted.
    """
    structlog.configure(
        processors=[*_pre_chain(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    for old in [h for h in root.handlers if h.get_name() == _HANDLER_NAME]:
        root.removeHandler(old)
    root.addHandler(_handler(log_json, stream or sys.stderr))
    root.setLevel(logging.WARNING)

    logging.getLogger("deobf").setLevel(logging.DEBUG if verbose else logging.WARNING)
