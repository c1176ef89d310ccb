# missionboard/api/v1/endpoints/registrations.py
from typing import List, Optional
from fastapi import APIRouter, Depends, status, Query, Response
from sqlalchemy.orm import Session

from missionboard.schemas.registration import (
    Registration as RegistrationSchema,
    RegistrationCreate,
    RegistrationResult,
    RegistrationStatusUpdate,
    RegistrationWithUser,
)
from missionboard.schemas.token import TokenPayload
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_event, crud_registration
from missionboard.middleware.error_handler import NotFoundError
from missionboard.services.registration_service import registration_service

router = APIRouter(tags=["Registrations"])


@router.post(
    "/events/{eventId}/register",
    response_model=RegistrationResult,
    status_code=status.HTTP_201_CREATED,
)
def register_for_event(
    eventId: str,
    response: Response,
    registration_in: Optional[RegistrationCreate] = None,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """
    Registers the caller for an event.

    Returns 201 for a new registration and 200 when a previously canceled
    registration is reactivated. Either way the status is CONFIRMED when the
    seats fit and WAITLISTED when the event is full.
    """
    outcome = registration_service.register(
        db,
        event_id=eventId,
        user_id=current_user.sub,
        obj_in=registration_in or RegistrationCreate(),
    )
    if not outcome.created:
        response.status_code = status.HTTP_200_OK

    registration = RegistrationSchema.model_validate(outcome.registration)
    return RegistrationResult(**registration.model_dump(), message=outcome.message)


@router.delete("/events/{eventId}/register", response_model=RegistrationSchema)
def cancel_registration(
    eventId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Cancels the caller's registration; the next waitlisted person moves up."""
    return registration_service.cancel(db, event_id=eventId, user_id=current_user.sub)


@router.get(
    "/organizations/{orgId}/events/{eventId}/registrations",
    response_model=List[RegistrationWithUser],
)
def list_event_registrations(
    orgId: str,
    eventId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """Registrations for an event, newest first, with the registrant's contact details."""
    deps.check_org_access(orgId, current_user)
    event = crud_event.event.get_in_organization(db, id=eventId, org_id=orgId)
    if not event:
        raise NotFoundError("Event not found")

    registrations = crud_registration.registration.get_multi_by_event(
        db, event_id=eventId, skip=skip, limit=limit
    )
    return [
        RegistrationWithUser(
            **RegistrationSchema.model_validate(reg).model_dump(),
            user_name=reg.user.name if reg.user else None,
            user_email=reg.user.email if reg.user else None,
            user_phone=reg.user.phone_number if reg.user else None,
        )
        for reg in registrations
    ]


@router.patch(
    "/organizations/{orgId}/events/{eventId}/registrations/{registrationId}",
    response_model=RegistrationSchema,
)
def update_registration_status(
    orgId: str,
    eventId: str,
    registrationId: str,
    status_in: RegistrationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Marks attendance or cancels a registration on the registrant's behalf."""
    deps.check_org_access(orgId, current_user)
    event = crud_event.event.get_in_organization(db, id=eventId, org_id=orgId)
    if not event:
        raise NotFoundError("Event not found")

    return registration_service.set_status(
        db, event=event, registration_id=registrationId, status=status_in.status
    )
