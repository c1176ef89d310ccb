from datetime import timedelta
from sqlalchemy.orm import Session

from missionboard.constants.statuses import (
    BillingInterval,
    EventStatus,
    RegistrationStatus,
)
from missionboard.models.event import Event
from missionboard.models.organization import Organization
from missionboard.models.plan import MembershipPlan
from missionboard.models.registration import EventRegistration
from missionboard.models.user import User
from missionboard.utils.dates import utcnow


def create_organization(db: Session, org_id: str = "org_abc", name: str = "Test Club") -> Organization:
    org = Organization(id=org_id, name=name)
    db.add(org)
    db.commit()
    db.refresh(org)
    return org


def create_user(
    db: Session,
    *,
    user_id: str | None = None,
    email: str = "member@example.com",
    name: str = "Test Member",
    org_id: str | None = "org_abc",
) -> User:
    user = User(name=name, email=email, organization_id=org_id)
    if user_id:
        user.id = user_id
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_event(
    db: Session,
    *,
    org_id: str = "org_abc",
    name: str = "Test Event",
    capacity: int | None = None,
    days_ahead: int = 7,
    status: str = EventStatus.SCHEDULED.value,
    is_private: bool = False,
    registration_deadline=None,
) -> Event:
    """
    Creates an event `days_ahead` days from now.
    """
    event = Event(
        organization_id=org_id,
        name=name,
        date=utcnow() + timedelta(days=days_ahead),
        capacity=capacity,
        status=status,
        is_private=is_private,
        registration_deadline=registration_deadline,
    )
    db.add(event)
    db.commit()
    db.refresh(event)
    return event


def create_registration(
    db: Session,
    *,
    event_id: str,
    user_id: str,
    status: str = RegistrationStatus.CONFIRMED.value,
    guests_count: int = 0,
    registration_date=None,
) -> EventRegistration:
    registration = EventRegistration(
        event_id=event_id,
        user_id=user_id,
        status=status,
        guests_count=guests_count,
    )
    if registration_date is not None:
        registration.registration_date = registration_date
    db.add(registration)
    db.commit()
    db.refresh(registration)
    return registration


def create_plan(
    db: Session,
    *,
    org_id: str = "org_abc",
    name: str = "Monthly",
    price: float = 25.0,
    interval: str = BillingInterval.MONTHLY.value,
    active: bool = True,
) -> MembershipPlan:
    plan = MembershipPlan(
        organization_id=org_id,
        name=name,
        price=price,
        interval=interval,
        features=["Clubhouse access"],
        active=active,
    )
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan
