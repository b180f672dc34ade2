"""Observability: structured logs (trace_id, counts, latency_ms), optional metrics stub."""

from __future__ import annotations

import logging
from typing import Any

_LOGGER = logging.getLogger("crm_filters")

# Optional metrics stub keyed by filter state ("active" or "inactive")
METRICS: dict[str, dict[str, int]] = {"evaluations": {}, "errors": {}}


def get_logger() -> logging.Logger:
    return _LOGGER


def configure_logging(level: str = "INFO") -> None:
    """Attach a stderr handler to the package logger unless logging is already configured."""
    if not _LOGGER.handlers and not logging.getLogger().handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s %(message)s"))
        _LOGGER.addHandler(handler)
    _LOGGER.setLevel(level)


def log_filter_evaluation(
    state: str,
    trace_id: str | None,
    latency_ms: float,
    error: str | None = None,
    extra: dict[str, Any] | None = None,
) -> None:
    """Emit structured log and update metrics stub."""
    payload: dict[str, Any] = {
        "state": state,
        "trace_id": trace_id,
        "latency_ms": round(latency_ms, 2),
    }
    if error:
        payload["error"] = error
    if extra:
        payload.update(extra)
    _LOGGER.info("filter_evaluation", extra=payload)
    METRICS["evaluations"][state] = METRICS["evaluations"].get(state, 0) + 1
    if error:
        METRICS["errors"][state] = METRICS["errors"].get(state, 0) + 1


def metrics_snapshot() -> dict[str, dict[str, int]]:
    """Return current metrics (for health output)."""
    return {k: dict(v) for k, v in METRICS.items()}


def reset_metrics() -> None:
    for counters in METRICS.values():
        counters.clear()
