"""API tests for the global exception handler.

The services register no routes of their own, so a throwaway route that
raises is added to the app under test.
"""

import logging

from fastapi.testclient import TestClient

from app import create_app
from app.services import API_GATEWAY


def _client_with_failing_route(test_settings) -> TestClient:
    app = create_app(API_GATEWAY, test_settings)

    @app.get("/boom")
    async def boom():
        raise RuntimeError("database password is hunter2")

    return TestClient(app, raise_server_exceptions=False)


class TestGlobalExceptionHandler:
    def test_returns_500(self, test_settings) -> None:
        response = _client_with_failing_route(test_settings).get("/boom")

        assert response.status_code == 500

    def test_body_is_generic_error_envelope(self, test_settings) -> None:
        response = _client_with_failing_route(test_settings).get("/boom")

        assert response.json() == {
            "success": False,
            "error": "internal_error",
            "message": "An unexpected error occurred. Please try again.",
        }

    def test_does_not_leak_exception_text(self, test_settings) -> None:
        """Internal error details never reach the client."""
        response = _client_with_failing_route(test_settings).get("/boom")

        assert "hunter2" not in response.text

    def test_logs_exception_with_request_context(self, test_settings, caplog) -> None:
        caplog.set_level(logging.ERROR, logger="storyquiz")

        _client_with_failing_route(test_settings).get("/boom")

        record = next(r for r in caplog.records if r.name == "storyquiz.app")
        assert record.getMessage() == "Unhandled exception: RuntimeError"
        assert record.path == "/boom"
        assert record.method == "GET"
        assert record.exc_info is not None
