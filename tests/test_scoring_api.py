"""Tests for the scoring and section HTTP endpoints."""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from page_intel.main import app
from tests.fixtures_consultation import FULL_INTELLIGENCE_RECORD


@pytest.fixture
def client():
    """Test client for the app."""
    return TestClient(app)


def test_completion_endpoint_empty_record(client):
    response = client.post("/v1/scoring/completion", json={"record": {}})

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 0
    assert data["tier"] == "insufficient"
    assert data["can_generate_brief"] is False
    assert data["tier_scores"]["required"]["total"] == 60


def test_completion_endpoint_defaults_record(client):
    response = client.post("/v1/scoring/completion", json={})
    assert response.status_code == 200
    assert response.json()["score"] == 0


def test_completion_endpoint_rejects_non_object_record(client):
    response = client.post("/v1/scoring/completion", json={"record": "industry=SaaS"})
    assert response.status_code == 422


def test_completion_endpoint_failure_returns_500(client):
    with patch(
        "page_intel.api.scoring.calculate_completion_score",
        side_effect=RuntimeError("boom"),
    ):
        response = client.post("/v1/scoring/completion", json={"record": {}})

    assert response.status_code == 500
    assert response.json()["detail"] == "Failed to compute completion score"


def test_intelligence_endpoint(client):
    response = client.post(
        "/v1/scoring/intelligence",
        json={"record": {"industry": "SaaS", "audience": "CFOs"}},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["total_score"] == 20
    assert data["level"] == "unqualified"
    assert data["who_you_are"]["industry"]["points"] == 10


def test_intelligence_endpoint_with_bonus(client):
    response = client.post(
        "/v1/scoring/intelligence",
        json={
            "record": {"industry": "SaaS", "audience": "CFOs"},
            "bonuses": {"market_research_complete": True},
        },
    )
    assert response.json()["total_score"] == 30
    assert response.json()["level"] == "identified"


def test_readiness_endpoint(client):
    response = client.post("/v1/scoring/readiness", json={"record": {"industry": "SaaS"}})

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 10
    assert data["can_generate"] is False
    assert "industry" not in data["missing_required"]


def test_registry_endpoint(client):
    response = client.get("/v1/registry")

    assert response.status_code == 200
    data = response.json()
    assert len(data["fields"]) == 32
    assert data["tier_max_points"]["required"] == 60
    assert data["fields"][0]["key"] == "businessName"


def test_page_completeness_endpoint(client):
    response = client.post(
        "/v1/sections/completeness",
        json={
            "record": {"companyName": "Northwind"},
            "sections": [{"type": "faq", "content": {"items": [{"q": "Why?"}]}}],
        },
    )

    assert response.status_code == 200
    data = response.json()
    assert data["score"] == 14
    assert "hero-text" in data["unlocked_sections"]
    assert "faq" in data["unlocked_sections"]


def test_section_status_endpoint(client):
    response = client.post("/v1/sections/stats-bar/status", json={"record": {}})

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "locked"
    assert data["requirement"] == "Proof points"
    assert data["progress"] == "0/3"


def test_section_status_endpoint_exact_match(client):
    fuzzy = client.post("/v1/sections/hero-/status", json={"record": {}})
    exact = client.post("/v1/sections/hero-/status?match=exact", json={"record": {}})

    assert fuzzy.json()["requirement"] == "Company name"
    assert exact.json()["requirement"] is None


def test_section_status_endpoint_rejects_bad_match(client):
    response = client.post("/v1/sections/faq/status?match=loose", json={"record": {}})
    assert response.status_code == 422


def test_gate_report_endpoint(client):
    response = client.post("/v1/gates", json={"record": FULL_INTELLIGENCE_RECORD})

    assert response.status_code == 200
    data = response.json()
    assert data["intelligence"]["level"] == "proven"
    assert data["can_generate_page"] is True
    assert data["can_generate_brief"] is False
    assert data["sections"]["stats-bar"]["status"] == "unlocked"


def test_gate_report_endpoint_accepts_record_id(client):
    response = client.post(
        "/v1/gates",
        json={"record": {"industry": "SaaS"}, "record_id": "cons-42"},
    )

    assert response.status_code == 200
    assert response.json()["intelligence"]["level"] == "unqualified"
