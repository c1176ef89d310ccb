# tests/api/v1/test_events.py

from datetime import datetime, timezone
from types import SimpleNamespace
from fastapi.testclient import TestClient
from unittest.mock import MagicMock

crud_event_mock = MagicMock()


def _event(**overrides):
    data = dict(
        id="evt_1",
        organization_id="org_abc",
        organizer_id="user_123",
        name="Spring Regatta",
        description=None,
        date=datetime(2030, 5, 1, 9, 0, tzinfo=timezone.utc),
        end_date=None,
        location="Harbor",
        location_details=None,
        capacity=20,
        is_private=False,
        registration_deadline=None,
        status="SCHEDULED",
        created_at=None,
        updated_at=None,
    )
    data.update(overrides)
    return SimpleNamespace(**data)


def test_create_event(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.create_for_organization.return_value = _event()

    response = test_client.post(
        "/api/v1/organizations/org_abc/events",
        json={"name": "Spring Regatta", "date": "2030-05-01T09:00:00Z", "capacity": 20},
    )

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == "evt_1"
    assert body["isPrivate"] is False
    kwargs = crud_event_mock.event.create_for_organization.call_args.kwargs
    assert kwargs["org_id"] == "org_abc"
    assert kwargs["organizer_id"] == "user_123"


def test_create_event_rejects_zero_capacity(test_client: TestClient):
    response = test_client.post(
        "/api/v1/organizations/org_abc/events",
        json={"name": "Spring Regatta", "date": "2030-05-01T09:00:00Z", "capacity": 0},
    )

    assert response.status_code == 400
    assert response.json()["category"] == "validation_error"
    assert response.json()["validation_errors"]


def test_create_event_rejects_deadline_after_date(test_client: TestClient):
    response = test_client.post(
        "/api/v1/organizations/org_abc/events",
        json={
            "name": "Spring Regatta",
            "date": "2030-05-01T09:00:00Z",
            "registrationDeadline": "2030-05-02T09:00:00Z",
        },
    )

    assert response.status_code == 400


def test_create_event_for_other_org_is_forbidden(test_client: TestClient):
    response = test_client.post(
        "/api/v1/organizations/org_other/events",
        json={"name": "Spring Regatta", "date": "2030-05-01T09:00:00Z"},
    )

    assert response.status_code == 403


def test_list_events_forbidden_for_other_org(test_client: TestClient):
    response = test_client.get("/api/v1/organizations/org_other/events")

    assert response.status_code == 403
    assert response.json()["message"] == "Not authorized"


def test_list_events(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_multi_by_organization.return_value = [
        dict(vars(_event()), registered=20, status_category="upcoming", is_full=True)
    ]

    response = test_client.get("/api/v1/organizations/org_abc/events")

    assert response.status_code == 200
    data = response.json()
    assert data[0]["registered"] == 20
    assert data[0]["statusCategory"] == "upcoming"
    assert data[0]["isFull"] is True


def test_get_event_not_found(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = None

    response = test_client.get("/api/v1/organizations/org_abc/events/evt_missing")

    assert response.status_code == 404
    assert response.json()["message"] == "Event not found"


def test_update_event_rejects_cancel_via_patch(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()

    response = test_client.patch(
        "/api/v1/organizations/org_abc/events/evt_1", json={"status": "CANCELED"}
    )

    assert response.status_code == 400


def test_update_event_checks_end_date_against_stored_date(
    monkeypatch, test_client: TestClient
):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()

    response = test_client.patch(
        "/api/v1/organizations/org_abc/events/evt_1",
        json={"endDate": "2030-04-01T09:00:00Z"},
    )

    assert response.status_code == 400
    assert response.json()["field"] == "endDate"


def test_cancel_event(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()
    crud_event_mock.event.cancel_event.return_value = _event(status="CANCELED")

    response = test_client.post("/api/v1/organizations/org_abc/events/evt_1/cancel")

    assert response.status_code == 200
    assert response.json()["status"] == "CANCELED"


def test_delete_event(monkeypatch, test_client: TestClient):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()

    response = test_client.delete("/api/v1/organizations/org_abc/events/evt_1")

    assert response.status_code == 204
    assert crud_event_mock.event.remove.call_args.kwargs["id"] == "evt_1"


def test_update_event_rejects_null_for_required_fields(
    monkeypatch, test_client: TestClient
):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()
    crud_event_mock.event.update.reset_mock()

    for body in ({"name": None}, {"isPrivate": None}, {"date": None}, {"status": None}):
        response = test_client.patch("/api/v1/organizations/org_abc/events/evt_1", json=body)

        assert response.status_code == 400
        assert response.json()["category"] == "validation_error"

    crud_event_mock.event.update.assert_not_called()


def test_update_event_allows_clearing_optional_fields(
    monkeypatch, test_client: TestClient
):
    monkeypatch.setattr("missionboard.api.v1.endpoints.events.crud_event", crud_event_mock)
    crud_event_mock.event.get_in_organization.return_value = _event()
    crud_event_mock.event.update.return_value = _event(location=None)

    response = test_client.patch(
        "/api/v1/organizations/org_abc/events/evt_1", json={"location": None}
    )

    assert response.status_code == 200
    assert crud_event_mock.event.update.call_args.kwargs["obj_in"] == {"location": None}
