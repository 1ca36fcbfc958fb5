"""Tests for the service-level routes and error rendering."""
from sqlalchemy.exc import OperationalError

from civiconnect.database import get_db
from civiconnect.main import app


class TestServiceRoutes:

    def test_root(self, client):
        resp = client.get("/")
        assert resp.status_code == 200
        assert resp.text == "Hello World!"

    def test_liveness(self, client):
        resp = client.get("/test")
        assert resp.status_code == 200
        assert resp.json() == {"message": "API is working!"}

    def test_health_connected(self, client):
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"database": "connected"}

    def test_health_disconnected(self, client):
        class _DeadSession:
            def execute(self, *args, **kwargs):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        app.dependency_overrides[get_db] = lambda: _DeadSession()
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["database"] == "disconnected"
        assert "connection refused" in resp.json()["error"]


class TestErrorRendering:

    def test_unknown_route_uses_error_body(self, client):
        resp = client.get("/nope")
        assert resp.status_code == 404
        assert resp.json() == {"error": "Not Found"}

    def test_uncaught_store_error_is_generic_500(self, client, monkeypatch):
        def _boom(db):
            raise OperationalError("SELECT users", {}, Exception("secret internals"))

        monkeypatch.setattr("civiconnect.services.user_service.list_users", _boom)
        resp = client.get("/users")
        assert resp.status_code == 500
        assert resp.json() == {"error": "Server error"}

    def test_cors_headers(self, client):
        resp = client.get("/test", headers={"Origin": "http://localhost:5173"})
        assert "access-control-allow-origin" in resp.headers
