# tests/crud/test_dashboard.py

from datetime import datetime, timezone

from missionboard.constants.statuses import EventStatus, PaymentStatus, SubscriptionStatus
from missionboard.crud.crud_dashboard import CRUDDashboard
from missionboard.models.event import Event
from missionboard.models.payment import Payment
from missionboard.models.subscription import Subscription
from tests.utils.factories import create_organization, create_plan, create_user

dashboard_crud = CRUDDashboard()


def test_get_stats(db_session_e2e):
    now = datetime(2026, 3, 10, 12, 0, tzinfo=timezone.utc)
    create_organization(db_session_e2e)
    create_organization(db_session_e2e, org_id="org_other", name="Other Club")
    member = create_user(db_session_e2e, email="a@example.com")
    create_user(db_session_e2e, email="b@example.com")
    create_user(db_session_e2e, email="c@example.com", org_id="org_other")
    plan = create_plan(db_session_e2e)

    for status in (SubscriptionStatus.ACTIVE.value, SubscriptionStatus.CANCELED.value):
        db_session_e2e.add(
            Subscription(
                organization_id="org_abc",
                user_id=member.id,
                plan_id=plan.id,
                status=status,
                start_date=now,
                current_period_start=now,
                current_period_end=now,
            )
        )
    for day, status in ((20, EventStatus.SCHEDULED), (25, EventStatus.CANCELED), (5, EventStatus.SCHEDULED)):
        db_session_e2e.add(
            Event(
                organization_id="org_abc",
                name=f"Event {day}",
                date=now.replace(day=day),
                status=status.value,
            )
        )
    # Next month is outside the window
    db_session_e2e.add(
        Event(
            organization_id="org_abc",
            name="April",
            date=datetime(2026, 4, 2, tzinfo=timezone.utc),
            status=EventStatus.SCHEDULED.value,
        )
    )
    for amount, status in ((40.0, PaymentStatus.COMPLETED), (10.5, PaymentStatus.COMPLETED), (99.0, PaymentStatus.FAILED)):
        db_session_e2e.add(
            Payment(organization_id="org_abc", amount=amount, status=status.value)
        )
    db_session_e2e.commit()

    stats = dashboard_crud.get_stats(db_session_e2e, org_id="org_abc", now=now)

    assert stats == {
        "total_members": 2,
        "active_subscriptions": 1,
        "upcoming_events": 1,
        "total_revenue": 50.5,
    }
