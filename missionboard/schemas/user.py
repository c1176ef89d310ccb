# missionboard/schemas/user.py
from pydantic import EmailStr, Field
from typing import List, Optional
from datetime import datetime

from missionboard.constants.statuses import MemberRole, MemberStatus
from missionboard.schemas.base import APIModel, PartialUpdate


class MemberBase(APIModel):
    name: Optional[str] = Field(None, json_schema_extra={"example": "Ada Lovelace"})
    email: Optional[EmailStr] = Field(
        None, json_schema_extra={"example": "ada@example.com"}
    )
    phone_number: Optional[str] = None
    notes: Optional[str] = None


class MemberCreate(MemberBase):
    email: EmailStr
    status: MemberStatus = MemberStatus.active
    role: MemberRole = MemberRole.MEMBER


class MemberUpdate(MemberBase, PartialUpdate):
    required_fields = ("status", "role")

    status: Optional[MemberStatus] = None
    role: Optional[MemberRole] = None


class UserSummary(APIModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None


class PlanSummary(APIModel):
    id: str
    name: str
    price: float
    currency: str
    interval: str


class MemberSubscription(APIModel):
    id: str
    status: str
    current_period_start: datetime
    current_period_end: datetime
    plan: PlanSummary


class Member(MemberBase):
    id: str
    organization_id: Optional[str] = None
    status: str
    role: str
    join_date: Optional[datetime] = None
    last_payment: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MemberDetail(Member):
    subscriptions: List[MemberSubscription] = []
