# missionboard/services/registration_service.py
"""
Event registration: the capacity / waitlist decision and waitlist promotion.

Every decision runs inside one transaction that starts by locking the event
row (`SELECT ... FOR UPDATE`), so two requests for the last seat of the same
event cannot both be confirmed on databases with row locks.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from missionboard.constants.statuses import EventStatus, RegistrationStatus
from missionboard.crud import crud_event, crud_registration, crud_user
from missionboard.middleware.error_handler import (
    AppError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from missionboard.models.event import Event
from missionboard.models.registration import EventRegistration
from missionboard.schemas.registration import (
    PublicRegistrationCreate,
    RegistrationCreate,
)
from missionboard.utils.dates import ensure_utc, utcnow

logger = logging.getLogger(__name__)

CONFIRMED_MESSAGE = "Registration successful!"
WAITLISTED_MESSAGE = "Event is full. You have been added to the waitlist."


def decide_status(capacity: Optional[int], taken_seats: int, requested_seats: int) -> str:
    """CONFIRMED when the requested seats fit, WAITLISTED otherwise."""
    if capacity is None or taken_seats + requested_seats <= capacity:
        return RegistrationStatus.CONFIRMED.value
    return RegistrationStatus.WAITLISTED.value


@dataclass
class RegistrationOutcome:
    registration: EventRegistration
    created: bool

    @property
    def message(self) -> str:
        if self.registration.status == RegistrationStatus.WAITLISTED.value:
            return WAITLISTED_MESSAGE
        return CONFIRMED_MESSAGE


class WaitlistPromoter:
    def promote_next(self, db: Session, *, event_id: str) -> Optional[EventRegistration]:
        """
        Confirms the oldest waitlisted registration of the event, if any.

        Does not commit; runs inside the caller's cancellation transaction.
        """
        next_in_line = crud_registration.registration.get_next_waitlisted(
            db, event_id=event_id
        )
        if next_in_line is None:
            return None
        next_in_line.status = RegistrationStatus.CONFIRMED.value
        db.add(next_in_line)
        logger.info(
            f"Promoted registration {next_in_line.id} from waitlist for event {event_id}"
        )
        return next_in_line


class EventRegistrationService:
    def __init__(self, promoter: Optional[WaitlistPromoter] = None):
        self.promoter = promoter or WaitlistPromoter()

    def register(
        self, db: Session, *, event_id: str, user_id: str, obj_in: RegistrationCreate
    ) -> RegistrationOutcome:
        """Registers an authenticated user for an event."""
        try:
            event = crud_event.event.get_for_update(db, id=event_id)
            if event is None:
                raise NotFoundError("Event not found")
            if event.status != EventStatus.SCHEDULED.value:
                raise ValidationError("Event is not open for registration")
            outcome = self._register_locked(db, event=event, user_id=user_id, obj_in=obj_in)
            db.commit()
        except AppError:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.error(
                f"Failed to register user {user_id} for event {event_id}", exc_info=True
            )
            raise

        db.refresh(outcome.registration)
        return outcome

    def register_public(
        self, db: Session, *, event_id: str, obj_in: PublicRegistrationCreate
    ) -> RegistrationOutcome:
        """
        Registers someone through the public event page. Only public scheduled
        events accept these; the registrant is matched to a user by email and
        a pending member is created for unknown emails.
        """
        try:
            event = crud_event.event.get_for_update(db, id=event_id)
            if (
                event is None
                or event.is_private
                or event.status != EventStatus.SCHEDULED.value
            ):
                raise NotFoundError("Event not found or not available for registration")
            self._check_deadline(event)
            user, created = crud_user.user.get_or_create_public_registrant(
                db,
                email=obj_in.email,
                name=obj_in.name,
                phone=obj_in.phone,
                org_id=event.organization_id,
            )
            if created:
                logger.info(f"Created pending member {user.id} from public registration")
            outcome = self._register_locked(db, event=event, user_id=user.id, obj_in=obj_in)
            db.commit()
        except AppError:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.error(f"Failed public registration for event {event_id}", exc_info=True)
            raise

        db.refresh(outcome.registration)
        return outcome

    def cancel(self, db: Session, *, event_id: str, user_id: str) -> EventRegistration:
        """
        Cancels the user's own registration. Canceling a confirmed one
        promotes the oldest waitlisted registration in the same transaction.
        """
        try:
            event = crud_event.event.get_for_update(db, id=event_id)
            if event is None:
                raise NotFoundError("Event not found")
            registration = crud_registration.registration.get_by_event_and_user(
                db, event_id=event_id, user_id=user_id
            )
            if registration is None or RegistrationStatus.is_canceled(registration.status):
                raise NotFoundError("You are not registered for this event")
            self._transition(
                db, registration=registration, status=RegistrationStatus.CANCELED_BY_USER.value
            )
            db.commit()
        except AppError:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.error(
                f"Failed to cancel registration of user {user_id} for event {event_id}",
                exc_info=True,
            )
            raise

        db.refresh(registration)
        logger.info(f"User {user_id} canceled registration {registration.id}")
        return registration

    def set_status(
        self, db: Session, *, event: Event, registration_id: str, status: str
    ) -> EventRegistration:
        """
        Organizer status change. Canceling a confirmed registration promotes
        the next waitlisted one; moving a registration into a seat-holding
        status goes through the capacity check.
        """
        try:
            locked_event = crud_event.event.get_for_update(db, id=event.id)
            registration = crud_registration.registration.get_in_event(
                db, id=registration_id, event_id=event.id
            )
            if locked_event is None or registration is None:
                raise NotFoundError("Registration not found")

            if (
                status in RegistrationStatus.seat_holding()
                and registration.status not in RegistrationStatus.seat_holding()
            ):
                taken = crud_registration.registration.get_taken_seats(db, event_id=event.id)
                if (
                    decide_status(locked_event.capacity, taken, registration.seats)
                    != RegistrationStatus.CONFIRMED.value
                ):
                    raise ConflictError("Event is at capacity")

            self._transition(db, registration=registration, status=status)
            db.commit()
        except AppError:
            db.rollback()
            raise
        except SQLAlchemyError:
            db.rollback()
            logger.error(
                f"Failed to update registration {registration_id}", exc_info=True
            )
            raise

        db.refresh(registration)
        return registration

    def _transition(self, db: Session, *, registration: EventRegistration, status: str) -> None:
        was_confirmed = registration.status == RegistrationStatus.CONFIRMED.value
        registration.status = status
        db.add(registration)
        # Only a canceled CONFIRMED registration triggers promotion
        if was_confirmed and RegistrationStatus.is_canceled(status):
            # Flush first so the freed seats are visible to the promotion
            db.flush()
            self.promoter.promote_next(db, event_id=registration.event_id)

    def _check_deadline(self, event: Event) -> None:
        deadline = ensure_utc(event.registration_deadline)
        if deadline is not None and utcnow() > deadline:
            raise ValidationError("Registration deadline has passed")

    def _register_locked(
        self, db: Session, *, event: Event, user_id: str, obj_in: RegistrationCreate
    ) -> RegistrationOutcome:
        self._check_deadline(event)

        existing = crud_registration.registration.get_by_event_and_user(
            db, event_id=event.id, user_id=user_id
        )
        if existing is not None and not RegistrationStatus.is_canceled(existing.status):
            raise ConflictError("You are already registered for this event")

        taken = crud_registration.registration.get_taken_seats(db, event_id=event.id)
        status = decide_status(event.capacity, taken, 1 + obj_in.guests_count)

        if existing is not None:
            # Reactivate the canceled row, keeping its original registration date
            existing.status = status
            existing.guests_count = obj_in.guests_count
            existing.notes = obj_in.notes
            db.add(existing)
            registration, created = existing, False
        else:
            registration = EventRegistration(
                event_id=event.id,
                user_id=user_id,
                status=status,
                guests_count=obj_in.guests_count,
                notes=obj_in.notes,
            )
            db.add(registration)
            created = True

        logger.info(
            f"Registration for user {user_id} on event {event.id}: {status} "
            f"({taken}/{event.capacity if event.capacity is not None else 'unlimited'} seats taken)"
        )
        return RegistrationOutcome(registration=registration, created=created)


registration_service = EventRegistrationService()
