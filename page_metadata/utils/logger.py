"""
Structured logging for the page metadata parser.
Every entry carries a trace ID so one extraction can be followed from the
HTTP request through the dispatcher down to individual rule matches.
"""
import uuid
import logging
import structlog
from contextvars import ContextVar
from typing import Any, Dict, Optional

from page_metadata.config import config

trace_id_var: ContextVar[str] = ContextVar("trace_id", default="")


def get_trace_id() -> str:
    """Current trace ID; a fresh one is created on first use."""
    trace_id = trace_id_var.get()
    if not trace_id:
        trace_id = set_trace_id()
    return trace_id


def set_trace_id(trace_id: Optional[str] = None) -> str:
    new_trace_id = trace_id or str(uuid.uuid4())[:8]
    trace_id_var.set(new_trace_id)
    return new_trace_id


def add_trace_id(logger: Any, method_name: str, event_dict: Dict[str, Any]) -> Dict[str, Any]:
    event_dict["trace_id"] = get_trace_id()
    return event_dict


def configure_logging():
    """Configure structlog; LOG_FORMAT picks JSON or console output."""
    processors = [
        structlog.contextvars.merge_contextvars,
        add_trace_id,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]

    if config.LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, config.LOG_LEVEL.upper())
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


class LayerLogger:
    """
    Logger for one component (ruleset, dispatcher, html_document, main).

    Rule matches and parse steps are debug events; fallbacks and the
    per-extraction summary are info; service failures are errors.
    """

    def __init__(self, layer_name: str):
        self.layer_name = layer_name
        self.logger = get_logger(layer_name)

    def log_rule_match(
        self,
        ruleset: str,
        rule: int,
        url: Optional[str] = None,
        **extra
    ):
        """Log which rule of a ruleset produced the value."""
        self.logger.debug(
            "rule_matched",
            layer=self.layer_name,
            ruleset=ruleset,
            rule=rule,
            url=url,
            **extra
        )

    def log_action(self, action: str, status: str = "started", **extra):
        self.logger.debug(
            f"action_{status}",
            layer=self.layer_name,
            action=action,
            **extra
        )

    def log_fallback(self, field: str, source: str, reason: str, **extra):
        """Log a field value that came from a fallback instead of the document."""
        self.logger.info(
            "fallback_triggered",
            layer=self.layer_name,
            field=field,
            source=source,
            reason=reason,
            **extra
        )

    def log_extraction(
        self,
        url: Optional[str],
        fields_present: list,
        fields_missing: list,
        **extra
    ):
        """Log which fields of a rule tree resolved."""
        self.logger.info(
            "metadata_extracted",
            layer=self.layer_name,
            url=url,
            fields_present=fields_present,
            fields_missing=fields_missing,
            **extra
        )

    def log_error(self, error: str, error_type: str = "unknown", **extra):
        self.logger.error(
            "error_occurred",
            layer=self.layer_name,
            error=error,
            error_type=error_type,
            **extra
        )


configure_logging()
