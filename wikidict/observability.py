"""Timing and structured events for pipeline stages and worker pools."""

from __future__ import annotations

import contextlib
import time
from typing import Iterator, Mapping, Optional

from . import logging_manager as log_mgr

logger = log_mgr.get_logger().getChild("observability")


def record_metric(
    name: str,
    value: float,
    attributes: Optional[Mapping[str, object]] = None,
) -> None:
    """Record a numeric observation as a structured debug log."""

    logger.debug(
        "Metric recorded",
        extra={
            "event": "observability.metric_recorded",
            "metric": name,
            "value": value,
            "attributes": dict(attributes or {}),
        },
    )


@contextlib.contextmanager
def pipeline_stage(stage: str, attributes: Optional[Mapping[str, object]] = None) -> Iterator[None]:
    """Instrument a pipeline stage with structured logging."""

    attrs = dict(attributes or {})
    with log_mgr.log_context(stage=stage):
        start = time.perf_counter()
        logger.debug(
            "Stage started",
            extra={"event": "pipeline.stage.start", "attributes": attrs},
        )
        yield
        duration_ms = (time.perf_counter() - start) * 1000.0
        record_metric("pipeline.stage.duration", duration_ms, {**attrs, "stage": stage})
        logger.debug(
            "Stage completed",
            extra={
                "event": "pipeline.stage.complete",
                "duration_ms": round(duration_ms, 2),
                "attributes": attrs,
            },
        )


def worker_pool_event(
    action: str,
    *,
    mode: str,
    max_workers: int,
    attributes: Optional[Mapping[str, object]] = None,
) -> None:
    """Emit a structured log for worker pool lifecycle transitions."""

    attrs = {"mode": mode, "max_workers": max_workers}
    if attributes:
        attrs.update(dict(attributes))
    logger.info(
        "Worker pool event",
        extra={
            "event": "worker_pool.%s" % action,
            "stage": "worker_pool",
            "attributes": attrs,
        },
    )
    record_metric(f"worker_pool.{action}", float(max_workers), {**attrs, "action": action})


__all__ = ["pipeline_stage", "record_metric", "worker_pool_event"]
