# missionboard/crud/crud_registration.py
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from missionboard.models.registration import EventRegistration
from missionboard.schemas.registration import RegistrationCreate, RegistrationStatusUpdate
from missionboard.constants.statuses import RegistrationStatus


class CRUDRegistration(
    CRUDBase[EventRegistration, RegistrationCreate, RegistrationStatusUpdate]
):
    def get_by_event_and_user(
        self, db: Session, *, event_id: str, user_id: str
    ) -> EventRegistration | None:
        return (
            db.query(self.model)
            .filter(self.model.event_id == event_id, self.model.user_id == user_id)
            .first()
        )

    def get_in_event(
        self, db: Session, *, id: str, event_id: str
    ) -> EventRegistration | None:
        return (
            db.query(self.model)
            .filter(self.model.id == id, self.model.event_id == event_id)
            .first()
        )

    def get_taken_seats(self, db: Session, *, event_id: str) -> int:
        """
        Seats held against the event capacity: each confirmed or attended
        registration holds one seat for the registrant plus one per guest.
        """
        taken = (
            db.query(func.coalesce(func.sum(1 + self.model.guests_count), 0))
            .filter(
                self.model.event_id == event_id,
                self.model.status.in_(RegistrationStatus.seat_holding()),
            )
            .scalar()
        )
        return int(taken or 0)

    def get_taken_seats_by_event(
        self, db: Session, *, event_ids: list[str]
    ) -> dict[str, int]:
        if not event_ids:
            return {}
        rows = (
            db.query(self.model.event_id, func.sum(1 + self.model.guests_count))
            .filter(
                self.model.event_id.in_(event_ids),
                self.model.status.in_(RegistrationStatus.seat_holding()),
            )
            .group_by(self.model.event_id)
            .all()
        )
        return {event_id: int(seats or 0) for event_id, seats in rows}

    def get_next_waitlisted(self, db: Session, *, event_id: str) -> EventRegistration | None:
        """Oldest waitlisted registration; ties on the timestamp break on id."""
        return (
            db.query(self.model)
            .filter(
                self.model.event_id == event_id,
                self.model.status == RegistrationStatus.WAITLISTED.value,
            )
            .order_by(self.model.registration_date.asc(), self.model.id.asc())
            .first()
        )

    def get_multi_by_event(
        self, db: Session, *, event_id: str, skip: int = 0, limit: int = 100
    ) -> list[EventRegistration]:
        """Registrations for an event, newest first, with the registrant loaded."""
        return (
            db.query(self.model)
            .options(joinedload(self.model.user))
            .filter(self.model.event_id == event_id)
            .order_by(self.model.registration_date.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def cancel_active_for_event(self, db: Session, *, event_id: str) -> int:
        """
        Moves every confirmed or waitlisted registration of the event to
        CANCELED_BY_ADMIN. Does not commit.
        """
        return (
            db.query(self.model)
            .filter(
                self.model.event_id == event_id,
                self.model.status.in_(
                    [
                        RegistrationStatus.CONFIRMED.value,
                        RegistrationStatus.WAITLISTED.value,
                    ]
                ),
            )
            .update(
                {self.model.status: RegistrationStatus.CANCELED_BY_ADMIN.value},
                synchronize_session="fetch",
            )
        )


registration = CRUDRegistration(EventRegistration)
