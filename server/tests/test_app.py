import pytest

from server import create_app


@pytest.fixture
def app():
    return create_app("testing")


@pytest.fixture
def client(app):
    return app.test_client()


def test_healthcheck(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.get_json() == {"status": "ok"}


def test_health_rejects_post(client):
    response = client.post("/api/health")
    assert response.status_code == 405
    assert response.get_json() == {"error": "Method Not Allowed"}


def test_testing_config_loaded(app):
    assert app.config["TESTING"] is True
    assert app.config["GEMINI_MODEL"]
