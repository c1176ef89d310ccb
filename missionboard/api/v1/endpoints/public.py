# missionboard/api/v1/endpoints/public.py
"""
Unauthenticated endpoints behind the public event pages.
"""
from typing import List
from fastapi import APIRouter, Depends, Request, status
from sqlalchemy.orm import Session

from missionboard.core.config import settings
from missionboard.core.limiter import limiter
from missionboard.crud import crud_event
from missionboard.db.session import get_db
from missionboard.middleware.error_handler import NotFoundError
from missionboard.schemas.event import PublicEvent, PublicEventDetail
from missionboard.schemas.registration import (
    PublicRegistrationCreate,
    PublicRegistrationRef,
    PublicRegistrationResult,
)
from missionboard.services.registration_service import registration_service

router = APIRouter(prefix="/public", tags=["Public"])


@router.get("/events", response_model=List[PublicEvent])
def list_public_events(db: Session = Depends(get_db)):
    """Upcoming scheduled events that are open to the public, soonest first."""
    return crud_event.event.get_public_events(db)


@router.get("/events/{eventId}", response_model=PublicEventDetail)
def get_public_event(eventId: str, db: Session = Depends(get_db)):
    event = crud_event.event.get_public_event(db, id=eventId)
    if event is None:
        raise NotFoundError("Event not found")
    return event


@router.post(
    "/events/{eventId}/register",
    response_model=PublicRegistrationResult,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.PUBLIC_REGISTRATION_RATE_LIMIT)
def register_public(
    request: Request,
    eventId: str,
    registration_in: PublicRegistrationCreate,
    db: Session = Depends(get_db),
):
    """
    Registers a visitor by name and email. Rate limited per client IP.
    """
    outcome = registration_service.register_public(
        db, event_id=eventId, obj_in=registration_in
    )
    return PublicRegistrationResult(
        message=outcome.message,
        registration=PublicRegistrationRef(
            id=outcome.registration.id, status=outcome.registration.status
        ),
    )
