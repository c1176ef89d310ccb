# missionboard/schemas/registration.py
from pydantic import EmailStr, Field, field_validator
from typing import Optional
from datetime import datetime

from missionboard.constants.statuses import RegistrationStatus
from missionboard.schemas.base import APIModel


class RegistrationCreate(APIModel):
    guests_count: int = Field(0, ge=0, description="Additional attendees besides the registrant")
    notes: Optional[str] = None


class PublicRegistrationCreate(RegistrationCreate):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Grace Hopper"})
    email: EmailStr = Field(..., json_schema_extra={"example": "grace@example.com"})
    phone: Optional[str] = None


class RegistrationStatusUpdate(APIModel):
    status: RegistrationStatus

    @field_validator("status")
    @classmethod
    def organizer_settable(cls, value: RegistrationStatus) -> RegistrationStatus:
        # Organizers can mark attendance, confirm, or cancel on the registrant's behalf
        if value not in (
            RegistrationStatus.ATTENDED,
            RegistrationStatus.CONFIRMED,
            RegistrationStatus.CANCELED_BY_ADMIN,
        ):
            raise ValueError(f"Status {value} cannot be set by an organizer")
        return value


class Registration(APIModel):
    id: str
    event_id: str
    user_id: str
    status: RegistrationStatus
    guests_count: int
    notes: Optional[str] = None
    registration_date: datetime


class RegistrationWithUser(Registration):
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    user_phone: Optional[str] = None


class RegistrationResult(Registration):
    message: str


class PublicRegistrationRef(APIModel):
    id: str
    status: RegistrationStatus


class PublicRegistrationResult(APIModel):
    message: str
    registration: PublicRegistrationRef
