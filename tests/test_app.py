"""
Tests for application wiring: startup, health, static files and error bodies
"""
from fastapi.testclient import TestClient

from student_registry_api.app.core.config import Settings
from student_registry_api.app.main import create_app
from tests.conftest import FakeSeedClient


def test_health_reports_lazy_store(client, seed_client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "students_loaded": False}
    assert seed_client.calls == 0

    client.get("/students")
    assert client.get("/health").json()["students_loaded"] is True


def test_preload_fetches_on_startup():
    seed = FakeSeedClient()
    app = create_app(settings=Settings(preload_students=True), seed_client=seed)
    with TestClient(app) as client:
        assert seed.calls == 1
        assert client.get("/health").json()["students_loaded"] is True
        client.get("/students")
    assert seed.calls == 1


def test_failed_preload_falls_back_to_lazy_loading():
    seed = FakeSeedClient(fail_times=1)
    app = create_app(settings=Settings(preload_students=True), seed_client=seed)
    with TestClient(app) as client:
        assert client.get("/health").json()["students_loaded"] is False
        assert client.get("/students").status_code == 200
    assert seed.calls == 2


def test_index_redirects_to_html_listing(client):
    response = client.get("/", follow_redirects=False)
    assert response.status_code == 307
    assert response.headers["location"] == "/students?format=html"


def test_static_script_is_served(client):
    response = client.get("/static/main.js")
    assert response.status_code == 200
    assert "newStudentForm" in response.text


def test_unknown_route_uses_error_body(client):
    response = client.get("/courses")
    assert response.status_code == 404
    assert response.json() == {"error": "Not Found"}


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("SEED_URL", "http://example.test/people")
    monkeypatch.setenv("SEED_TIMEOUT", "2.5")
    monkeypatch.setenv("PRELOAD_STUDENTS", "yes")
    monkeypatch.setenv("PORT", "8080")
    settings = Settings()
    assert settings.seed_url == "http://example.test/people"
    assert settings.seed_timeout == 2.5
    assert settings.preload_students is True
    assert settings.port == 8080
