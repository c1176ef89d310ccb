# missionboard/schemas/event.py
from pydantic import Field, field_validator, model_validator
from typing import Optional
from datetime import datetime

from missionboard.constants.statuses import EventStatus
from missionboard.schemas.base import APIModel, PartialUpdate
from missionboard.utils.dates import ensure_utc


class EventBase(APIModel):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Spring Regatta"})
    description: Optional[str] = None
    date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    location_details: Optional[str] = None
    capacity: Optional[int] = Field(
        None, gt=0, description="Maximum seats; omit for unlimited."
    )
    is_private: bool = False
    registration_deadline: Optional[datetime] = None

    @field_validator("date", "end_date", "registration_deadline")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)

    @model_validator(mode="after")
    def check_dates(self):
        if self.end_date and self.end_date < self.date:
            raise ValueError("End date cannot be before the event date")
        if self.registration_deadline and self.registration_deadline > self.date:
            raise ValueError("Registration deadline cannot be after the event date")
        return self


class EventCreate(EventBase):
    pass


class EventUpdate(PartialUpdate):
    """All fields optional; only the ones sent are applied."""

    required_fields = ("name", "date", "is_private", "status")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    location_details: Optional[str] = None
    capacity: Optional[int] = Field(None, gt=0)
    is_private: Optional[bool] = None
    registration_deadline: Optional[datetime] = None
    status: Optional[EventStatus] = None

    @field_validator("date", "end_date", "registration_deadline")
    @classmethod
    def to_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(value)


class Event(EventBase):
    id: str
    organization_id: str
    organizer_id: Optional[str] = None
    status: EventStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class EventWithStats(Event):
    registered: int = Field(0, description="Seats held by confirmed attendees and their guests")
    status_category: str = Field(..., json_schema_extra={"example": "upcoming"})
    is_full: bool = False


class PublicEvent(APIModel):
    id: str
    name: str
    description: Optional[str] = None
    date: datetime
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    location_details: Optional[str] = None
    capacity: Optional[int] = None
    registration_deadline: Optional[datetime] = None
    organizer_name: Optional[str] = None
    registered: int = 0
    is_full: bool = False


class PublicEventDetail(PublicEvent):
    has_deadline_passed: bool = False
