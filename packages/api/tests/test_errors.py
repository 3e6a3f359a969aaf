# This project was developed with assistance from AI tools.
"""Tests for the Problem Details error handlers."""

import logging

from fastapi.testclient import TestClient

from src.main import app


def test_unhandled_error_logs_and_returns_same_request_id(client, mock_session, caplog):
    mock_session.execute.side_effect = RuntimeError("boom")
    unsafe_client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="src.main"):
        resp = unsafe_client.get("/api/products/banks", headers={"X-Request-ID": "req-123"})

    assert resp.status_code == 500
    body = resp.json()
    assert body["request_id"] == "req-123"
    assert body["detail"] == "An unexpected error occurred."
    assert "request_id=req-123" in caplog.text


def test_unhandled_error_generated_id_matches_log(client, mock_session, caplog):
    mock_session.execute.side_effect = RuntimeError("boom")
    unsafe_client = TestClient(app, raise_server_exceptions=False)

    with caplog.at_level(logging.ERROR, logger="src.main"):
        resp = unsafe_client.get("/api/products/banks")

    request_id = resp.json()["request_id"]
    assert request_id
    assert f"request_id={request_id}" in caplog.text


def test_http_error_echoes_request_id(client, mock_session):
    mock_session.execute.return_value.scalar_one_or_none.return_value = None

    resp = client.get(
        "/api/products/7c9e6679-7425-40de-944b-e07fc1f90ae7",
        headers={"X-Request-ID": "req-404"},
    )

    assert resp.status_code == 404
    assert resp.json()["request_id"] == "req-404"
    assert resp.json()["title"] == "Not Found"
