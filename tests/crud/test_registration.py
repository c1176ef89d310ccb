# tests/crud/test_registration.py

from datetime import timedelta
from unittest.mock import MagicMock

from missionboard.constants.statuses import RegistrationStatus
from missionboard.crud.crud_registration import CRUDRegistration
from missionboard.models.registration import EventRegistration
from missionboard.utils.dates import utcnow
from tests.utils.factories import (
    create_event,
    create_organization,
    create_registration,
    create_user,
)

registration_crud = CRUDRegistration(EventRegistration)


def test_get_by_event_and_user_filters_both_columns():
    db_session = MagicMock()
    expected = MagicMock()
    db_session.query.return_value.filter.return_value.first.return_value = expected

    result = registration_crud.get_by_event_and_user(
        db_session, event_id="evt_1", user_id="usr_1"
    )

    assert result is expected
    db_session.query.assert_called_once_with(EventRegistration)


def test_taken_seats_counts_guests_of_seat_holding_registrations(db_session_e2e):
    create_organization(db_session_e2e)
    event = create_event(db_session_e2e, capacity=20)
    statuses = [
        (RegistrationStatus.CONFIRMED.value, 2),
        (RegistrationStatus.ATTENDED.value, 1),
        (RegistrationStatus.WAITLISTED.value, 5),
        (RegistrationStatus.CANCELED_BY_USER.value, 3),
        (RegistrationStatus.CANCELED_BY_ADMIN.value, 0),
    ]
    for i, (status, guests) in enumerate(statuses):
        user = create_user(db_session_e2e, email=f"user{i}@example.com")
        create_registration(
            db_session_e2e, event_id=event.id, user_id=user.id,
            status=status, guests_count=guests,
        )

    # (1 + 2) + (1 + 1)
    assert registration_crud.get_taken_seats(db_session_e2e, event_id=event.id) == 5
    assert registration_crud.get_taken_seats_by_event(
        db_session_e2e, event_ids=[event.id]
    ) == {event.id: 5}


def test_taken_seats_of_empty_event_is_zero(db_session_e2e):
    create_organization(db_session_e2e)
    event = create_event(db_session_e2e)

    assert registration_crud.get_taken_seats(db_session_e2e, event_id=event.id) == 0
    assert registration_crud.get_taken_seats_by_event(db_session_e2e, event_ids=[]) == {}


def test_next_waitlisted_is_oldest(db_session_e2e):
    create_organization(db_session_e2e)
    event = create_event(db_session_e2e, capacity=1)
    now = utcnow()
    late = create_user(db_session_e2e, email="late@example.com")
    early = create_user(db_session_e2e, email="early@example.com")
    create_registration(
        db_session_e2e, event_id=event.id, user_id=late.id,
        status=RegistrationStatus.WAITLISTED.value,
        registration_date=now - timedelta(minutes=1),
    )
    expected = create_registration(
        db_session_e2e, event_id=event.id, user_id=early.id,
        status=RegistrationStatus.WAITLISTED.value,
        registration_date=now - timedelta(minutes=30),
    )

    result = registration_crud.get_next_waitlisted(db_session_e2e, event_id=event.id)

    assert result.id == expected.id


def test_cancel_active_for_event_leaves_attended_alone(db_session_e2e):
    create_organization(db_session_e2e)
    event = create_event(db_session_e2e)
    regs = {}
    for status in (
        RegistrationStatus.CONFIRMED.value,
        RegistrationStatus.WAITLISTED.value,
        RegistrationStatus.ATTENDED.value,
    ):
        user = create_user(db_session_e2e, email=f"{status.lower()}@example.com")
        regs[status] = create_registration(
            db_session_e2e, event_id=event.id, user_id=user.id, status=status
        )

    changed = registration_crud.cancel_active_for_event(db_session_e2e, event_id=event.id)
    db_session_e2e.commit()

    assert changed == 2
    assert regs["CONFIRMED"].status == RegistrationStatus.CANCELED_BY_ADMIN.value
    assert regs["WAITLISTED"].status == RegistrationStatus.CANCELED_BY_ADMIN.value
    assert regs["ATTENDED"].status == RegistrationStatus.ATTENDED.value
