"""Logging helpers shared across VenTech services."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from typing import Any, Optional

from pythonjsonlogger import jsonlogger
from opentelemetry import trace

# Set per request by the request logging middleware
request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


class OTelJSONFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter that adds the active request id and, when a span is
    recording, the OpenTelemetry trace/span identifiers.
    """

    def add_fields(
        self,
        log_record: dict[str, Any],
        record: logging.LogRecord,
        message_dict: dict[str, Any],
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        request_id = request_id_var.get()
        if request_id and "request_id" not in log_record:
            log_record["request_id"] = request_id

        ctx = trace.get_current_span().get_span_context()
        if ctx.is_valid:
            log_record["trace_id"] = trace.format_trace_id(ctx.trace_id)
            log_record["span_id"] = trace.format_span_id(ctx.span_id)

        log_record["level"] = str(log_record.get("level") or record.levelname).upper()


def setup_logging(level: str = "INFO") -> None:
    """Configure the root logger to emit one JSON object per line on stdout."""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        OTelJSONFormatter(
            "%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())

    # Reloads would otherwise stack handlers
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").disabled = True
    logging.getLogger("pymongo").setLevel("WARNING")
