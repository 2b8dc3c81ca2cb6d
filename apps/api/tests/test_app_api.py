from fastapi.testclient import TestClient

from api.app import create_app


def test_health_endpoint_response_shape() -> None:
    client = TestClient(create_app())
    response = client.get("/healthz")
    body = response.json()

    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["status"] == "ok"


def test_ready_endpoint_response_shape() -> None:
    client = TestClient(create_app())
    response = client.get("/readyz")
    body = response.json()

    assert response.status_code == 200
    assert body["success"] is True
    assert body["data"]["status"] == "ready"


def test_unknown_route_is_404() -> None:
    client = TestClient(create_app())
    response = client.get("/v1/unknown")

    assert response.status_code == 404
