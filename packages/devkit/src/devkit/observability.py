from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_tracing_configured = False
_logging_configured = False
_probe_filter_installed = False


class ProbeAccessLogFilter(logging.Filter):
    """Drops successful uvicorn access lines for health probes."""

    def __init__(self, probe_paths: tuple[str, ...]) -> None:
        super().__init__()
        self._probe_paths = frozenset(_strip_path(path) for path in probe_paths)

    def filter(self, record: logging.LogRecord) -> bool:
        # uvicorn.access args: (client, method, path, http_version, status)
        args = record.args
        if not isinstance(args, tuple) or len(args) < 5:
            return True
        path, status = args[2], args[4]
        if not isinstance(path, str):
            return True
        try:
            status_code = int(status)
        except (TypeError, ValueError):
            return True
        return not (status_code == 200 and _strip_path(path) in self._probe_paths)


def _strip_path(path: str) -> str:
    base = path.split("?", 1)[0]
    if len(base) > 1:
        base = base.rstrip("/")
    return base


def configure_otel(service_name: str) -> None:
    global _tracing_configured
    if _tracing_configured:
        return
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    _tracing_configured = True


def configure_logging(level: str = "INFO") -> None:
    global _logging_configured
    if _logging_configured:
        return
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    _logging_configured = True


def configure_probe_access_log_filter(probe_paths: tuple[str, ...] = ("/healthz", "/readyz")) -> None:
    global _probe_filter_installed
    if _probe_filter_installed:
        return
    logging.getLogger("uvicorn.access").addFilter(ProbeAccessLogFilter(probe_paths))
    _probe_filter_installed = True
