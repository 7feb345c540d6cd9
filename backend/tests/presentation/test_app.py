"""HTTP tests for application bootstrap: middleware, docs and error handling."""

import logging
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from presentation.api.v1.dependencies import get_activity_repository, get_db_session


class TestSecurityHeaders:
    """Test headers added to every response."""

    def test_headers_present(self, client):
        """Test helmet-style headers on a normal response."""
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert "default-src 'self'" in response.headers["Content-Security-Policy"]

    def test_headers_on_error_response(self, client):
        """Test that handled errors carry the headers too."""
        response = client.get("/activities/missing")
        assert response.status_code == 404
        assert response.headers["X-Content-Type-Options"] == "nosniff"


class TestCors:
    """Test CORS configuration."""

    def test_allowed_origin_preflight(self, client):
        """Test a preflight from a configured origin."""
        response = client.options(
            "/activities",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "PATCH",
            },
        )
        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
        assert "PATCH" in response.headers["access-control-allow-methods"]

    def test_unknown_origin_gets_no_cors_header(self, client):
        """Test that other origins are not allowed."""
        response = client.get("/health", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in response.headers


class TestCompressionAndLimits:
    """Test gzip compression and the request body limit."""

    def test_large_response_is_gzipped(self, client):
        """Test that responses above the minimum size are compressed."""
        for index in range(10):
            client.post("/activities", json={"type": "essay", "search": f"activity number {index}"})

        response = client.get("/activities", headers={"Accept-Encoding": "gzip"})

        assert response.headers.get("content-encoding") == "gzip"
        assert response.json()["total"] == 10

    def test_oversized_body_is_rejected(self, client):
        """Test that a body above max_body_size returns 413."""
        response = client.post("/activities", json={"type": "essay", "search": "x" * 4096})
        assert response.status_code == 413
        assert response.json()["statusCode"] == 413

    def test_streamed_body_without_length_is_rejected(self, client):
        """Test that a chunked body is counted and rejected past the limit."""
        chunks = [b'{"type": "essay", "search": "', b"x" * 4096, b'"}']

        response = client.post(
            "/activities",
            content=iter(chunks),
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 413
        assert response.json()["statusCode"] == 413

    def test_unknown_route_uses_error_body(self, client):
        """Test that routing errors share the error body shape."""
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"statusCode": 404, "message": "Not Found", "error": "Not Found"}


class TestDocsAndHealth:
    """Test documentation and health endpoints."""

    def test_health(self, client, test_settings):
        """Test the health check body."""
        assert client.get("/health").json() == {"status": "healthy", "version": test_settings.app_version}

    def test_openapi_operation_ids(self, client):
        """Test that operation ids are the endpoint function names."""
        schema = client.get("/openapi.json").json()
        operations = schema["paths"]["/activities"]
        assert operations["post"]["operationId"] == "create"
        assert operations["get"]["operationId"] == "find_all"
        assert schema["paths"]["/activities/{activity_id}"]["patch"]["operationId"] == "partial_update"
        assert schema["servers"][0]["url"] == "http://localhost:3000"

    def test_swagger_ui(self, client):
        """Test that the Swagger UI is served at the docs path."""
        response = client.get("/docs")
        assert response.status_code == 200
        assert "swagger" in response.text.lower()


class TestUnexpectedErrors:
    """Test that persistence failures become a generic 500."""

    def test_repository_failure_returns_500(self, app):
        """Test the generic error body when the repository raises."""

        class BrokenRepository:
            async def get_by_id(self, activity_id):
                raise ConnectionError("database unreachable")

        app.dependency_overrides[get_activity_repository] = lambda: BrokenRepository()
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/activities/any")

        assert response.status_code == 500
        assert response.json() == {
            "statusCode": 500,
            "message": "Internal server error",
            "error": "Internal Server Error",
        }

    def test_500_carries_security_headers(self, app):
        """Test that the generic 500 still has the hardening headers."""

        class BrokenRepository:
            async def get_by_id(self, activity_id):
                raise ConnectionError("database unreachable")

        app.dependency_overrides[get_activity_repository] = lambda: BrokenRepository()
        client = TestClient(app, raise_server_exceptions=False)

        response = client.get("/activities/any")

        assert response.status_code == 500
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "default-src 'self'" in response.headers["Content-Security-Policy"]

    def test_traceback_logged_once(self, app, caplog):
        """Test that an unhandled error is logged with its traceback only once."""

        class BrokenRepository:
            async def get_by_id(self, activity_id):
                raise ConnectionError("database unreachable")

        app.dependency_overrides[get_activity_repository] = lambda: BrokenRepository()
        client = TestClient(app, raise_server_exceptions=False)

        with caplog.at_level(logging.INFO, logger="activities"):
            client.get("/activities/any")

        with_traceback = [record for record in caplog.records if record.exc_info]
        assert len(with_traceback) == 1
        assert any(" 500 " in record.getMessage() for record in caplog.records)


@pytest.fixture
def failing_commit_client(app):
    """Fixture for a client backed by the SQL repository whose commit fails."""
    session = MagicMock()
    session.flush = AsyncMock()
    session.refresh = AsyncMock()
    session.execute = AsyncMock(return_value=MagicMock(rowcount=1))
    session.commit = AsyncMock(side_effect=ConnectionError("commit failed"))

    async def override_session():
        yield session

    app.dependency_overrides.pop(get_activity_repository)
    app.dependency_overrides[get_db_session] = override_session
    return TestClient(app, raise_server_exceptions=False)


class TestCommitFailures:
    """Test that a failed commit is reported to the client."""

    def test_create_returns_500(self, failing_commit_client):
        """Test that POST answers 500, not 201, when the commit fails."""
        response = failing_commit_client.post("/activities", json={"type": "essay"})

        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_delete_returns_500(self, failing_commit_client):
        """Test that DELETE answers 500, not 204, when the commit fails."""
        response = failing_commit_client.delete("/activities/a1")
        assert response.status_code == 500
