"""Logging, metrics and tracing helpers shared by the search stack.

Prometheus collectors live in a process-wide registry, so creating the same
metric twice (for example when several services are built in one test run)
re-uses the collector that is already registered. Instrumentation failures are
contained here and never reach the search path.
"""

from __future__ import annotations

import json
import logging
import time
from contextlib import contextmanager
from typing import Any, Dict, Iterable, Iterator, Optional

from opentelemetry import trace as otel_trace
from prometheus_client import REGISTRY, Counter, Histogram

_TRACER_NAME = "emoji_search"


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """Append bound and per-call ``context`` to each message as sorted JSON.

    Glyphs stay readable in the rendered context (``ensure_ascii`` is off).
    """

    def bind(self, **context: Any) -> "StructuredLoggerAdapter":
        return StructuredLoggerAdapter(self.logger, {**self.extra, **context})

    def process(self, msg: str, kwargs: Dict[str, Any]):
        context = {**self.extra, **(kwargs.pop("context", None) or {})}
        if not context:
            return msg, kwargs
        return f"{msg} | {_render_context(context)}", kwargs


def _render_context(context: Dict[str, Any]) -> str:
    try:
        return json.dumps(context, sort_keys=True, default=str, ensure_ascii=False)
    except TypeError:
        # Mixed key types cannot be sorted.
        flattened = {str(key): str(value) for key, value in context.items()}
        return json.dumps(flattened, sort_keys=True, ensure_ascii=False)


def get_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """Return a :class:`StructuredLoggerAdapter` for ``name``."""

    return StructuredLoggerAdapter(logging.getLogger(name), context)


class _MetricWrapper:
    """Shared ``labels`` handling for the metric handles below.

    A handle whose collector is missing, or whose labels were rejected,
    silently records nothing.
    """

    def __init__(self, metric: Any = None) -> None:
        self._metric = metric

    def labels(self, **labels: Any):
        if self._metric is None or not hasattr(self._metric, "labels"):
            return type(self)(None)
        try:
            child = self._metric.labels(**labels)
        except ValueError:
            return type(self)(None)
        return type(self)(child)


class CounterHandle(_MetricWrapper):
    """Monotonic request and event counts."""

    def inc(self, amount: float = 1.0) -> None:
        if self._metric is not None and amount >= 0:
            self._metric.inc(amount)


class HistogramHandle(_MetricWrapper):
    """Latency distribution in seconds."""

    def observe(self, value: float) -> None:
        if self._metric is not None:
            self._metric.observe(value)

    @contextmanager
    def time(self) -> Iterator[None]:
        started = time.perf_counter()
        try:
            yield
        finally:
            self.observe(time.perf_counter() - started)


def _register(factory: Any, name: str, documentation: str, label_names: Iterable[str]) -> Any:
    try:
        return factory(name, documentation, labelnames=tuple(label_names))
    except ValueError:
        # Already registered by an earlier service instance.
        return REGISTRY._names_to_collectors.get(name)  # type: ignore[attr-defined]


def create_counter(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> CounterHandle:
    """Create (or re-use) a Prometheus counter."""

    return CounterHandle(_register(Counter, name, documentation, label_names or ()))


def create_histogram(
    name: str,
    documentation: str,
    label_names: Optional[Iterable[str]] = None,
) -> HistogramHandle:
    """Create (or re-use) a Prometheus histogram."""

    return HistogramHandle(_register(Histogram, name, documentation, label_names or ()))


@contextmanager
def start_span(name: str, attributes: Optional[Dict[str, Any]] = None):
    """Start an OpenTelemetry span (a no-op span unless an SDK is configured)."""

    tracer = otel_trace.get_tracer(_TRACER_NAME)
    with tracer.start_as_current_span(name) as span:
        if attributes:
            add_span_attributes(span, attributes)
        yield span


def add_span_attributes(span: Any, attributes: Dict[str, Any]) -> None:
    """Attach ``attributes`` to ``span``, skipping ``None`` values."""

    if span is None:
        return
    for key, value in attributes.items():
        if isinstance(key, str) and value is not None:
            span.set_attribute(key, value)


def record_exception(span: Any, error: BaseException) -> None:
    """Mark ``span`` as failed with ``error``."""

    if span is None:
        return
    span.record_exception(error)
    span.set_attribute("error", True)


__all__ = [
    "StructuredLoggerAdapter",
    "get_logger",
    "CounterHandle",
    "HistogramHandle",
    "create_counter",
    "create_histogram",
    "start_span",
    "add_span_attributes",
    "record_exception",
]
