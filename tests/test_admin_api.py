"""Tests for admin dashboard endpoints."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from app.db.supabase_client import StoreNotConfiguredError
from app.main import app

client = TestClient(app)


def _patch_reads(**overrides):
    defaults = {
        "list_users": [{"id": "u1", "created_at": "2026-01-01", "base_score": 33, "latest_score": 56}],
        "list_app_test_responses": [{"id": "a1", "user_id": "u1", "is_retake": False}],
        "list_lesson_completions": [],
        "list_web_test_responses": [{"id": "w1", "score_band": "strong"}],
        "list_dashboard_content": [{"id": "c1"}, {"id": "c2"}],
    }
    defaults.update(overrides)
    return [patch(f"app.api.admin.{name}", return_value=value) for name, value in defaults.items()]


def test_dashboard():
    patches = _patch_reads()
    for p in patches:
        p.start()
    try:
        response = client.get("/v1/admin/dashboard")
    finally:
        for p in patches:
            p.stop()

    assert response.status_code == 200
    data = response.json()
    assert data["stats"]["total_users"] == 1
    assert data["stats"]["average_score"] == 56
    assert data["stats"]["content_count"] == 2
    assert data["stats"]["web_band_counts"]["strong"] == 1
    assert data["progress"][0]["improvement"] == 23
    assert data["users"][0]["attempts"][0]["id"] == "a1"


def test_dashboard_store_not_configured():
    with patch("app.api.admin.list_users", side_effect=StoreNotConfiguredError("missing")):
        response = client.get("/v1/admin/dashboard")
    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_dashboard_read_failure_treated_as_empty():
    """A failing table read is logged and counted as no rows."""
    with patch("app.db.dashboard.get_supabase") as mock_get_supabase:
        mock_client = MagicMock()
        mock_client.table.return_value.select.return_value.order.return_value.execute.side_effect = (
            RuntimeError("relation does not exist")
        )
        mock_get_supabase.return_value = mock_client

        response = client.get("/v1/admin/dashboard")

    assert response.status_code == 200
    assert response.json()["stats"]["total_users"] == 0


def test_list_responses_filter():
    with patch("app.api.admin.list_quiz_responses", return_value=[{"id": "w1"}]) as mock_list:
        response = client.get("/v1/admin/responses?score_band=ready&limit=5")

    assert response.status_code == 200
    assert response.json() == [{"id": "w1"}]
    mock_list.assert_called_once_with(score_band="ready", limit=5, offset=0)


def test_list_responses_failure_hides_details():
    with patch("app.api.admin.list_quiz_responses", side_effect=RuntimeError("JWT expired")):
        response = client.get("/v1/admin/responses")

    assert response.status_code == 500
    assert response.json() == {"detail": "Internal server error"}


def test_get_response():
    row = {"id": "w1", "email": "ada@example.com", "score_band": "strong"}
    with patch("app.api.admin.get_quiz_response", return_value=row) as mock_get:
        response = client.get("/v1/admin/responses/w1")

    assert response.status_code == 200
    assert response.json() == row
    mock_get.assert_called_once_with("w1")


def test_get_response_not_found():
    with patch("app.api.admin.get_quiz_response", return_value=None):
        response = client.get("/v1/admin/responses/missing")
    assert response.status_code == 404
