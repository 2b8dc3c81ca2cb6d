from __future__ import annotations

from contextvars import ContextVar
from dataclasses import asdict, dataclass
from typing import Protocol

from prometheus_client import CollectorRegistry, Counter, Histogram, generate_latest

_trace_id_ctx: ContextVar[str] = ContextVar("trace_id", default="")

LATENCY_BUCKETS_MS = (5, 10, 25, 50, 100, 250, 500, 1000, 5000)


def set_trace_id(trace_id: str) -> None:
    _trace_id_ctx.set(trace_id)


def get_trace_id() -> str:
    return _trace_id_ctx.get()


@dataclass(frozen=True)
class RequestMetric:
    method: str
    path: str
    status_code: int
    duration_ms: float
    trace_id: str


class RequestMetricCollector(Protocol):
    def observe(self, metric: RequestMetric) -> None: ...


class InMemoryRequestMetrics:
    def __init__(self) -> None:
        self._metrics: list[RequestMetric] = []

    def observe(self, metric: RequestMetric) -> None:
        self._metrics.append(metric)

    def snapshot(self) -> list[dict]:
        return [asdict(item) for item in self._metrics]


class PrometheusRequestMetrics:
    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._requests = Counter(
            "zone_api_http_requests_total",
            "Total zone API HTTP requests",
            labelnames=("method", "path", "status_code"),
            registry=self._registry,
        )
        self._latency = Histogram(
            "zone_api_http_request_duration_ms",
            "Zone API HTTP request latency in milliseconds",
            labelnames=("method", "path"),
            buckets=LATENCY_BUCKETS_MS,
            registry=self._registry,
        )

    def observe(self, metric: RequestMetric) -> None:
        self._requests.labels(metric.method, metric.path, str(metric.status_code)).inc()
        self._latency.labels(metric.method, metric.path).observe(metric.duration_ms)

    def render(self) -> str:
        return generate_latest(self._registry).decode("utf-8")


class FanOutRequestMetrics:
    def __init__(self, collectors: list[RequestMetricCollector]) -> None:
        self._collectors = collectors

    def observe(self, metric: RequestMetric) -> None:
        for collector in self._collectors:
            collector.observe(metric)


WEATHER_OUTCOMES = ("fresh", "fetched", "stale", "neutral")


class WeatherOutcomeMetrics:
    """Counts how each weather lookup was answered: fresh cache hit, upstream fetch, stale fallback or neutral."""

    def __init__(self) -> None:
        self._registry = CollectorRegistry()
        self._outcomes = Counter(
            "zone_api_weather_outcomes_total",
            "Weather lookups by how they were answered",
            labelnames=("outcome",),
            registry=self._registry,
        )
        self._counts = dict.fromkeys(WEATHER_OUTCOMES, 0)

    def record(self, outcome: str) -> None:
        if outcome not in self._counts:
            raise ValueError(f"unknown weather outcome: {outcome}")
        self._counts[outcome] += 1
        self._outcomes.labels(outcome).inc()

    def snapshot(self) -> dict[str, int]:
        return dict(self._counts)

    def render(self) -> str:
        return generate_latest(self._registry).decode("utf-8")
