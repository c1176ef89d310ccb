# missionboard/api/v1/endpoints/events.py
import logging
from typing import List
from fastapi import APIRouter, Depends, status, Query, Response
from sqlalchemy.orm import Session

from missionboard.schemas.event import (
    Event as EventSchema,
    EventCreate,
    EventUpdate,
    EventWithStats,
)
from missionboard.schemas.token import TokenPayload
from missionboard.models.organization import Organization
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_event
from missionboard.constants.statuses import EventStatus
from missionboard.middleware.error_handler import NotFoundError, ValidationError
from missionboard.utils.dates import ensure_utc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Events"])


def _get_event_or_404(db: Session, *, event_id: str, org_id: str):
    event = crud_event.event.get_in_organization(db, id=event_id, org_id=org_id)
    if not event:
        raise NotFoundError("Event not found")
    return event


@router.post(
    "/organizations/{orgId}/events",
    response_model=EventSchema,
    status_code=status.HTTP_201_CREATED,
)
def create_event(
    event_in: EventCreate,
    db: Session = Depends(get_db),
    organization: Organization = Depends(deps.get_current_organization),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Creates a new scheduled event for the organization."""
    event = crud_event.event.create_for_organization(
        db, obj_in=event_in, org_id=organization.id, organizer_id=current_user.sub
    )
    logger.info(f"Event {event.id} created in organization {organization.id}")
    return event


@router.get("/organizations/{orgId}/events", response_model=List[EventWithStats])
def list_events(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """Lists the organization's events by date, with seats taken and a status category."""
    deps.check_org_access(orgId, current_user)
    return crud_event.event.get_multi_by_organization(
        db, org_id=orgId, skip=skip, limit=limit
    )


@router.get("/organizations/{orgId}/events/{eventId}", response_model=EventWithStats)
def get_event_by_id(
    orgId: str,
    eventId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    event = _get_event_or_404(db, event_id=eventId, org_id=orgId)
    return crud_event.event.with_stats(db, event=event)


@router.patch("/organizations/{orgId}/events/{eventId}", response_model=EventSchema)
def update_event(
    orgId: str,
    eventId: str,
    event_in: EventUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Partially update an event."""
    deps.check_org_access(orgId, current_user)
    event = _get_event_or_404(db, event_id=eventId, org_id=orgId)

    update_data = event_in.model_dump(exclude_unset=True)
    if update_data.get("status") == EventStatus.CANCELED.value:
        raise ValidationError(
            "Events are canceled through the cancel endpoint", field="status"
        )

    date = update_data.get("date", ensure_utc(event.date))
    end_date = update_data.get("end_date", ensure_utc(event.end_date))
    deadline = update_data.get(
        "registration_deadline", ensure_utc(event.registration_deadline)
    )
    if end_date and end_date < date:
        raise ValidationError("End date cannot be before the event date", field="endDate")
    if deadline and deadline > date:
        raise ValidationError(
            "Registration deadline cannot be after the event date",
            field="registrationDeadline",
        )

    return crud_event.event.update(db, db_obj=event, obj_in=update_data)


@router.post(
    "/organizations/{orgId}/events/{eventId}/cancel", response_model=EventSchema
)
def cancel_event(
    orgId: str,
    eventId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """
    Cancels the event. Confirmed and waitlisted registrations are canceled
    by the organizer; nobody is promoted.
    """
    deps.check_org_access(orgId, current_user)
    event = _get_event_or_404(db, event_id=eventId, org_id=orgId)
    event = crud_event.event.cancel_event(db, event=event)
    logger.info(f"Event {eventId} canceled by {current_user.sub}")
    return event


@router.delete(
    "/organizations/{orgId}/events/{eventId}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_event(
    orgId: str,
    eventId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Deletes the event together with its registrations."""
    deps.check_org_access(orgId, current_user)
    _get_event_or_404(db, event_id=eventId, org_id=orgId)
    crud_event.event.remove(db, id=eventId)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
