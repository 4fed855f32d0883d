"""Tests for API endpoints (no external services required)."""

from unittest.mock import MagicMock, patch

from fastapi.testclient import TestClient

from src.api.main import app
from src.api.routes.extraction import NO_ITEMS_HINT

client = TestClient(app)


def test_health():
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


def test_extract_route_registered():
    routes = [getattr(r, "path", None) for r in app.routes]
    assert "/api/extract" in routes


def test_extract_requires_transcript():
    response = client.post("/api/extract", json={})
    assert response.status_code == 422  # missing required field


def test_extract_rejects_malformed_reference_date():
    response = client.post(
        "/api/extract",
        json={"transcript": "Action: renew the certs", "reference_date": "next tuesday"},
    )
    assert response.status_code == 422


def test_extract_returns_items():
    response = client.post(
        "/api/extract",
        json={
            "transcript": (
                "Action: Update the docs by Friday (@John)\n"
                "- Sarah will prepare the slides by 2026-02-20\n"
                "[ ] Book the offsite venue"
            ),
            "reference_date": "2026-02-18",
        },
    )
    assert response.status_code == 200
    data = response.json()
    assert data["items_extracted"] == 3
    assert data["reference_date"] == "2026-02-18"
    assert data["message"] is None
    assert data["action_items"][0] == {
        "task": "Update the docs",
        "owner": "John",
        "due_date": "2026-02-20",
    }
    assert data["action_items"][2] == {
        "task": "Book the offsite venue",
        "owner": "Unassigned",
        "due_date": "Not Found",
    }


def test_extract_empty_result_carries_hint():
    """Zero items is a normal 200 response, not an error."""
    response = client.post(
        "/api/extract",
        json={"transcript": "Let's circle back next sprint", "reference_date": "2026-02-18"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["items_extracted"] == 0
    assert data["action_items"] == []
    assert data["message"] == NO_ITEMS_HINT


@patch("src.api.routes.extraction.today_in_timezone")
def test_extract_defaults_reference_date(mock_today: MagicMock):
    from datetime import date

    mock_today.return_value = date(2026, 2, 18)
    response = client.post("/api/extract", json={"transcript": "Todo: call the venue tomorrow"})

    assert response.status_code == 200
    data = response.json()
    assert data["reference_date"] == "2026-02-18"
    assert data["action_items"][0]["due_date"] == "2026-02-19"
