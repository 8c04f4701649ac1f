"""Tests for request-id, timing and error middleware."""

from __future__ import annotations

from roster.api.middleware.errors import problem_response, status_for_error_code


class TestRequestID:
    def test_generated(self, client):
        resp = client.get("/health/live")
        assert resp.headers["X-Request-ID"]

    def test_echoed(self, client):
        resp = client.get("/health/live", headers={"X-Request-ID": "req-123"})
        assert resp.headers["X-Request-ID"] == "req-123"


class TestTiming:
    def test_header_present(self, client):
        resp = client.get("/health/live")
        assert float(resp.headers["X-Process-Time-Ms"]) >= 0


class TestErrorMapping:
    def test_known_codes(self):
        assert status_for_error_code("NOT_FOUND") == 404
        assert status_for_error_code("CONFLICT") == 409
        assert status_for_error_code("VALIDATION_FAILED") == 400
        assert status_for_error_code("UNAVAILABLE") == 503

    def test_unknown_code_is_500(self):
        assert status_for_error_code("SOMETHING_ELSE") == 500

    def test_problem_response(self):
        resp = problem_response(status=404, title="Don't know coach", details={"entity": {"id": 1}})
        assert resp.status_code == 404
        assert resp.media_type == "application/problem+json"


class TestUnhandledException:
    def test_returns_problem(self, app, client):
        @app.get("/boom")
        def boom():
            raise RuntimeError("kaput")

        resp = client.get("/boom")
        assert resp.status_code == 500
        body = resp.json()
        assert body["title"] == "Internal Server Error"
        assert "kaput" not in body["detail"]
