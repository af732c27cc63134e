"""Logging helpers (formatter, trace filter and dictConfig builder)."""

from __future__ import annotations

import json
import logging
import os
import time
import traceback
from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from datetime import datetime
from logging.config import dictConfig
from typing import Any

from opentelemetry import trace


def _level(env_var: str, default: str) -> str:
    return os.getenv(env_var, default).upper()


def _should_emit_json_payload() -> bool:
    # Managed runtimes parse JSON log lines into structured payloads.
    return bool(os.getenv("K_SERVICE") or os.getenv("KUBERNETES_SERVICE_HOST"))


def _structured_payload(record: logging.LogRecord) -> dict[str, Any]:
    record_data = record.__dict__.get("data")

    payload: dict[str, Any] = {
        "message": record.getMessage(),
        "severity": record.levelname,
        "logger": record.name,
        "timestamp": (
            f"{time.strftime('%Y-%m-%dT%H:%M:%S', time.gmtime(record.created))}"
            f".{int(record.msecs):03d}Z"
        ),
    }
    if record.exc_info:
        payload["exception"] = "".join(traceback.format_exception(*record.exc_info)).rstrip("\n")
    if record_data:
        payload["data"] = _sanitize_for_json(record_data)
    trace_fields = record.__dict__.get("otel")
    if trace_fields:
        payload["otel"] = trace_fields
    return payload


class ExtrasFormatter(logging.Formatter):
    """Append structured `data` payloads when present."""

    def format(self, record: logging.LogRecord) -> str:
        if _should_emit_json_payload():
            return json.dumps(_structured_payload(record), sort_keys=True, separators=(",", ":"))

        formatted = super().format(record)
        record_data = record.__dict__.get("data")
        if record_data:
            try:
                encoded = json.dumps(record_data, sort_keys=True, separators=(",", ":"))
            except TypeError:
                encoded = str(record_data)
            return f"{formatted} | data={encoded}"
        return formatted


class OtelContextLogFilter(logging.Filter):
    """Attach the active OpenTelemetry trace and span ids to the record."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - thin wrapper
        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            record.__dict__["otel"] = {
                "trace_id": f"{span_context.trace_id:032x}",
                "span_id": f"{span_context.span_id:016x}",
            }
        return True


def build_log_config(
    *,
    root_level_env: str = "FORMGUARD_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Return a dictConfig-compatible logging configuration."""

    loggers: dict[str, dict[str, Any]] = {
        "formguard.token_store": {
            "level": _level("FORMGUARD_STORE_LOG_LEVEL", "INFO"),
            "handlers": ["console"],
            "propagate": False,
        },
    }
    if extra_loggers:
        loggers.update(extra_loggers)

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "console": {
                "()": ExtrasFormatter,
                "format": "%(asctime)s %(levelname)s %(name)s: %(message)s",
                "datefmt": "%Y-%m-%dT%H:%M:%S",
            }
        },
        "filters": {"otel_context": {"()": OtelContextLogFilter}},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "console",
                "stream": "ext://sys.stdout",
                "filters": ["otel_context"],
            }
        },
        "root": {"level": _level(root_level_env, root_default), "handlers": ["console"]},
        "loggers": loggers,
    }


def _sanitize_for_json(value: Any, depth: int = 10) -> Any:
    """Return a JSON-serializable copy; fallback to string for unknowns."""

    if depth <= 0:
        return "<depth_exceeded>"
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, (bytes, bytearray)):
        return f"<bytes len={len(value)}>"
    if isinstance(value, datetime):
        return value.isoformat()
    if is_dataclass(value) and not isinstance(value, type):
        return _sanitize_for_json(asdict(value), depth - 1)
    if isinstance(value, Mapping):
        return {str(k): _sanitize_for_json(v, depth - 1) for k, v in value.items()}
    if isinstance(value, (list, tuple, set)):
        return [_sanitize_for_json(item, depth - 1) for item in value]
    return str(value)


def configure_logging(
    *,
    root_level_env: str = "FORMGUARD_LOG_LEVEL",
    root_default: str = "INFO",
    extra_loggers: Mapping[str, dict[str, Any]] | None = None,
) -> None:
    """Apply the shared logging config."""
    config = build_log_config(
        root_level_env=root_level_env,
        root_default=root_default,
        extra_loggers=extra_loggers,
    )
    dictConfig(config)
    logging.getLogger("formguard.observability.logging").debug(
        "configured logging",
        extra={"data": {"root_level": config["root"]["level"]}},
    )


__all__ = ["ExtrasFormatter", "OtelContextLogFilter", "build_log_config", "configure_logging"]
