"""
structlog setup for the metadata scraper.

Every event carries a trace id (one per API request, or created on first
use for library calls) and the component that emitted it, so a single
scrape can be followed through fetch, plugins and merge.
"""
import logging
import uuid
from contextvars import ContextVar
from typing import Any, Dict, Optional

import structlog

from metascraper.config import config

_trace_id: ContextVar[str] = ContextVar("scrape_trace_id", default="")


def _new_trace_id() -> str:
    return uuid.uuid4().hex[:8]


def set_trace_id(trace_id: Optional[str] = None) -> str:
    """Start a trace for the current context and return its id."""
    trace_id = trace_id or _new_trace_id()
    _trace_id.set(trace_id)
    return trace_id


def get_trace_id() -> str:
    return _trace_id.get() or set_trace_id()


def inject_trace_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict.setdefault("trace_id", get_trace_id())
    return event_dict


def _renderer():
    if config.is_console_logging():
        return structlog.dev.ConsoleRenderer(colors=True)
    return structlog.processors.JSONRenderer()


def configure_logging(level: Optional[str] = None):
    """Install the processor chain; level defaults to LOG_LEVEL."""
    level_name = (level or config.LOG_LEVEL).upper()
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.contextvars.merge_contextvars,
            inject_trace_id,
            structlog.processors.StackInfoRenderer(),
            _renderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level_name, logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LayerLogger:
    """
    Logger bound to one scraper component.

    Events are named after what happened: ``fetch_html_started``,
    ``scrape_completed``, ``decision`` and ``component_error``.
    """

    def __init__(self, component: str):
        self.component = component
        self.logger = get_logger(component).bind(component=component)

    def log_action(self, action: str, status: str = "started", **extra):
        self.logger.info(f"{action}_{status}", **extra)

    def log_decision(self, decision: str, reason: str, **extra):
        self.logger.info("decision", decision=decision, reason=reason, **extra)

    def log_debug(self, event: str, **extra):
        self.logger.debug(event, **extra)

    def log_error(self, error: str, error_type: str = "unknown", **extra):
        self.logger.error("component_error", error=error, error_type=error_type, **extra)


configure_logging()
