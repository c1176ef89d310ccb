# missionboard/schemas/subscription.py
from typing import Optional
from datetime import datetime

from pydantic import field_validator

from missionboard.constants.statuses import SubscriptionStatus
from missionboard.schemas.base import APIModel
from missionboard.schemas.user import PlanSummary, UserSummary
from missionboard.utils.dates import ensure_utc


class SubscriptionCreate(APIModel):
    user_id: str
    plan_id: str
    custom_start_date: Optional[datetime] = None

    @field_validator("custom_start_date")
    @classmethod
    def to_utc(cls, value):
        return ensure_utc(value)


class SubscriptionUpdate(APIModel):
    plan_id: Optional[str] = None
    status: Optional[SubscriptionStatus] = None
    current_period_end: Optional[datetime] = None
    cancel_at_period_end: Optional[bool] = None
    canceled_at: Optional[datetime] = None

    @field_validator("current_period_end", "canceled_at")
    @classmethod
    def to_utc(cls, value):
        return ensure_utc(value)


class Subscription(APIModel):
    id: str
    organization_id: str
    user_id: str
    plan_id: str
    managed_by_id: Optional[str] = None
    status: SubscriptionStatus
    start_date: datetime
    current_period_start: datetime
    current_period_end: datetime
    cancel_at_period_end: bool
    canceled_at: Optional[datetime] = None
    trial_start_date: Optional[datetime] = None
    trial_end_date: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SubscriptionWithRelations(Subscription):
    user: UserSummary
    plan: PlanSummary
