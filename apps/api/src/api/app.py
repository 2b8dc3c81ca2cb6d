from __future__ import annotations

from devkit.observability import configure_logging, configure_otel, configure_probe_access_log_filter
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response

from api.dependencies import get_settings, get_weather_metrics
from api.errors import ApiError
from api.middleware import ObservabilityMiddleware
from api.observability import FanOutRequestMetrics, InMemoryRequestMetrics, PrometheusRequestMetrics
from api.response import error_response, success_response
from api.routers.zones import router as zones_router


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Zone Demand API", version="0.1.0")
    configure_logging(settings.LOG_LEVEL)
    configure_otel(service_name=settings.SERVICE_NAME)
    configure_probe_access_log_filter()
    app.state.api_metrics = InMemoryRequestMetrics()
    app.state.prom_metrics = PrometheusRequestMetrics()
    app.add_middleware(
        ObservabilityMiddleware,
        collector=FanOutRequestMetrics([app.state.api_metrics, app.state.prom_metrics]),
    )
    app.include_router(zones_router)

    @app.get("/healthz")
    async def healthz() -> dict:
        return success_response({"status": "ok"}, meta={})

    @app.get("/readyz")
    async def readyz() -> dict:
        return success_response({"status": "ready"}, meta={})

    @app.get("/metrics")
    async def metrics() -> Response:
        payload = app.state.prom_metrics.render() + get_weather_metrics().render()
        return Response(content=payload, media_type="text/plain; version=0.0.4")

    @app.exception_handler(ApiError)
    async def handle_api_error(_: Request, exc: ApiError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=error_response(exc.code, exc.message))

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(err["msg"] for err in exc.errors())
        return JSONResponse(
            status_code=422,
            content=error_response("VALIDATION_ERROR", message),
        )

    return app


app = create_app()
