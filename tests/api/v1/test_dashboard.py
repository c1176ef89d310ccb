# tests/api/v1/test_dashboard.py

from fastapi.testclient import TestClient
from unittest.mock import MagicMock


def test_dashboard_stats(monkeypatch, test_client: TestClient):
    crud_dashboard_mock = MagicMock()
    monkeypatch.setattr(
        "missionboard.api.v1.endpoints.dashboard.crud_dashboard", crud_dashboard_mock
    )
    crud_dashboard_mock.dashboard.get_stats.return_value = {
        "total_members": 12,
        "active_subscriptions": 7,
        "upcoming_events": 2,
        "total_revenue": 1234.5,
    }

    response = test_client.get("/api/v1/organizations/org_abc/dashboard/stats")

    assert response.status_code == 200
    assert response.json() == {
        "totalMembers": 12,
        "activeSubscriptions": 7,
        "upcomingEvents": 2,
        "totalRevenue": 1234.5,
    }


def test_dashboard_stats_forbidden_for_other_org(test_client: TestClient):
    response = test_client.get("/api/v1/organizations/org_other/dashboard/stats")

    assert response.status_code == 403
