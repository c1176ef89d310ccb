# missionboard/schemas/organization.py
from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime

from missionboard.schemas.base import APIModel


class OrganizationSettingsUpdate(APIModel):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Harbor Rowing Club"})
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    website: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Organization name is required")
        return value.strip()


class OrganizationSettings(APIModel):
    # id is None when the organization has not saved any settings yet
    id: Optional[str] = None
    name: str = ""
    contact_email: Optional[str] = None
    contact_phone: Optional[str] = None
    website: Optional[str] = None
    updated_at: Optional[datetime] = None
