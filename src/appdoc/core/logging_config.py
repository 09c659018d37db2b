"""Structured logging for the appdoc CLI and embedding services.

stdlib loggers (``logging.getLogger(__name__)``) are rendered through
structlog's ``ProcessorFormatter``.  ``APPDOC_OBSERVABILITY_LOG_FORMAT``
picks the renderer; at DEBUG level every line also names the module,
function and line that emitted it.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from appdoc.core.config import ObservabilityConfig

# Handlers installed by setup_logging carry this name so a second call
# replaces them without touching handlers owned by the host application.
HANDLER_NAME = "appdoc"


def _shared_processors(debug: bool) -> list[Any]:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    if debug:
        processors.append(
            structlog.processors.CallsiteParameterAdder(
                {
                    structlog.processors.CallsiteParameter.MODULE,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                }
            )
        )
    return processors


def _renderer(log_format: str, stream: Any) -> Any:
    use_console = log_format == "console" or (log_format == "auto" and stream.isatty())
    if use_console:
        return structlog.dev.ConsoleRenderer(colors=stream.isatty())
    return structlog.processors.JSONRenderer(sort_keys=True)


def setup_logging(config: ObservabilityConfig, stream: Any = None) -> logging.Handler:
    """Route stdlib logging through structlog and return the installed handler."""
    stream = stream or sys.stderr
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    shared = _shared_processors(debug=level <= logging.DEBUG)

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(config.log_format, stream),
        ],
    )

    handler = logging.StreamHandler(stream)
    handler.set_name(HANDLER_NAME)
    handler.setFormatter(formatter)

    root = logging.getLogger()
    for existing in [h for h in root.handlers if h.get_name() == HANDLER_NAME]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    logging.getLogger("appdoc").setLevel(level)
    return handler
