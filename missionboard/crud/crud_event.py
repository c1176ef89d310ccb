# missionboard/crud/crud_event.py
from datetime import datetime
from typing import List

from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from missionboard.models.event import Event
from missionboard.schemas.event import EventCreate, EventUpdate
from missionboard.constants.statuses import EventStatus
from missionboard.crud.crud_registration import registration as crud_registration
from missionboard.utils.dates import ensure_utc, utcnow


def status_category(event: Event, now: datetime) -> str:
    """Bucket used by the organizer's event list."""
    if event.status == EventStatus.CANCELED.value:
        return "canceled"
    if ensure_utc(event.date) >= now:
        return "upcoming"
    return "past"


def is_full(capacity: int | None, registered: int) -> bool:
    return capacity is not None and registered >= capacity


class CRUDEvent(CRUDBase[Event, EventCreate, EventUpdate]):
    def get_for_update(self, db: Session, *, id: str) -> Event | None:
        """
        Loads the event and locks its row until the transaction ends.

        Concurrent registrations for the same event serialize on this lock
        (no-op on SQLite).
        """
        return db.query(self.model).filter(self.model.id == id).with_for_update().first()

    def get_in_organization(self, db: Session, *, id: str, org_id: str) -> Event | None:
        return (
            db.query(self.model)
            .filter(self.model.id == id, self.model.organization_id == org_id)
            .first()
        )

    def create_for_organization(
        self, db: Session, *, obj_in: EventCreate, org_id: str, organizer_id: str | None
    ) -> Event:
        db_obj = self.model(
            **obj_in.model_dump(),
            organization_id=org_id,
            organizer_id=organizer_id,
            status=EventStatus.SCHEDULED.value,
        )
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def with_stats(self, db: Session, *, event: Event, now: datetime | None = None) -> dict:
        now = now or utcnow()
        registered = crud_registration.get_taken_seats(db, event_id=event.id)
        return self._to_stats_dict(event, registered, now)

    def get_multi_by_organization(
        self, db: Session, *, org_id: str, skip: int = 0, limit: int = 100
    ) -> List[dict]:
        """
        Gets the organization's events ordered by date, each with its seat
        count and status category.
        """
        events = (
            db.query(self.model)
            .filter(self.model.organization_id == org_id)
            .order_by(self.model.date.asc(), self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )
        seats = crud_registration.get_taken_seats_by_event(
            db, event_ids=[event.id for event in events]
        )
        now = utcnow()
        return [self._to_stats_dict(event, seats.get(event.id, 0), now) for event in events]

    def get_public_events(self, db: Session, *, now: datetime | None = None) -> List[dict]:
        """Upcoming scheduled events that are not private."""
        now = now or utcnow()
        events = (
            db.query(self.model)
            .options(joinedload(self.model.organizer))
            .filter(
                self.model.is_private == False,  # noqa: E712
                self.model.status == EventStatus.SCHEDULED.value,
                self.model.date >= now,
            )
            .order_by(self.model.date.asc(), self.model.id)
            .all()
        )
        seats = crud_registration.get_taken_seats_by_event(
            db, event_ids=[event.id for event in events]
        )
        return [self._to_public_dict(event, seats.get(event.id, 0)) for event in events]

    def get_public_event(
        self, db: Session, *, id: str, now: datetime | None = None
    ) -> dict | None:
        now = now or utcnow()
        event = (
            db.query(self.model)
            .options(joinedload(self.model.organizer))
            .filter(self.model.id == id, self.model.is_private == False)  # noqa: E712
            .first()
        )
        if event is None:
            return None
        result = self._to_public_dict(
            event, crud_registration.get_taken_seats(db, event_id=event.id)
        )
        deadline = ensure_utc(event.registration_deadline)
        result["has_deadline_passed"] = deadline is not None and deadline < now
        return result

    def cancel_event(self, db: Session, *, event: Event) -> Event:
        """
        Cancels the event and every confirmed or waitlisted registration.
        No waitlist promotion happens for a canceled event.
        """
        event.status = EventStatus.CANCELED.value
        db.add(event)
        crud_registration.cancel_active_for_event(db, event_id=event.id)
        db.commit()
        db.refresh(event)
        return event

    @staticmethod
    def _to_stats_dict(event: Event, registered: int, now: datetime) -> dict:
        event_dict = {c.name: getattr(event, c.name) for c in event.__table__.columns}
        event_dict["registered"] = registered
        event_dict["status_category"] = status_category(event, now)
        event_dict["is_full"] = is_full(event.capacity, registered)
        return event_dict

    @staticmethod
    def _to_public_dict(event: Event, registered: int) -> dict:
        return {
            "id": event.id,
            "name": event.name,
            "description": event.description,
            "date": event.date,
            "end_date": event.end_date,
            "location": event.location,
            "location_details": event.location_details,
            "capacity": event.capacity,
            "registration_deadline": event.registration_deadline,
            "organizer_name": event.organizer.name if event.organizer else None,
            "registered": registered,
            "is_full": is_full(event.capacity, registered),
        }


event = CRUDEvent(Event)
