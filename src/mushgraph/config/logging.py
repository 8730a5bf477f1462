"""Log routing for mushgraph.

Graph and traversal modules log through ``logging.getLogger(__name__)``.
``configure_logging`` sends those records, and structlog loggers used by
the CLI, through a single stderr handler rendered either for a console or
as JSON lines.

Levels per logger:

- ``mushgraph``: DEBUG when verbose, WARNING otherwise.
- ``mushgraph.services.search``: per-search summaries fire on every query,
  so they stay at INFO even when verbose unless ``trace`` is set.
"""

from __future__ import annotations

import logging
import sys
import uuid
from typing import Any

import structlog

PACKAGE_LOGGER = "mushgraph"
SEARCH_LOGGER = "mushgraph.services.search"


def _stringify_ids(
    _logger: Any, _method: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Render UUID node ids (and edge id tuples of them) as plain strings."""
    for key, value in event_dict.items():
        if isinstance(value, uuid.UUID):
            event_dict[key] = str(value)
        elif isinstance(value, tuple) and any(isinstance(v, uuid.UUID) for v in value):
            event_dict[key] = [str(v) for v in value]
    return event_dict


def _renderer(log_json: bool) -> structlog.types.Processor:
    if log_json:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
    trace: bool = False,
) -> None:
    """Install the stderr handler and set mushgraph logger levels.

    Safe to call repeatedly; the root handler is replaced each time.

    Args:
        verbose: DEBUG output for ``mushgraph.*``.
        log_json: JSON lines instead of the console renderer.
        trace: Also emit traversal debug records from the search module.
    """
    pre_chain: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        _stringify_ids,
    ]

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
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.WARNING)

    verbose = verbose or trace
    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
    if trace:
        search_level = logging.DEBUG
    elif verbose:
        search_level = logging.INFO
    else:
        search_level = logging.NOTSET
    logging.getLogger(SEARCH_LOGGER).setLevel(search_level)
