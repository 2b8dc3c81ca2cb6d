from fastapi.testclient import TestClient

from api.app import create_app


def test_trace_header_is_propagated() -> None:
    client = TestClient(create_app())

    response = client.get("/healthz", headers={"x-trace-id": "trace-abc"})

    assert response.status_code == 200
    assert response.headers["x-trace-id"] == "trace-abc"


def test_trace_header_is_generated_when_missing() -> None:
    client = TestClient(create_app())

    response = client.get("/healthz")

    assert response.headers["x-trace-id"]


def test_request_latency_metric_is_collected() -> None:
    app = create_app()
    client = TestClient(app)

    response = client.get("/readyz")
    metrics = app.state.api_metrics.snapshot()

    assert response.status_code == 200
    assert metrics[-1]["path"] == "/readyz"
    assert metrics[-1]["status_code"] == 200
    assert metrics[-1]["duration_ms"] >= 0


def test_prometheus_metrics_endpoint_exposes_http_metrics() -> None:
    app = create_app()
    client = TestClient(app)

    client.get("/healthz")
    response = client.get("/metrics")

    assert response.status_code == 200
    assert "zone_api_http_requests_total" in response.text
    assert "zone_api_http_request_duration_ms" in response.text


def test_metrics_endpoint_exposes_weather_outcomes() -> None:
    client = TestClient(create_app())

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "zone_api_weather_outcomes_total" in response.text
