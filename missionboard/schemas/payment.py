# missionboard/schemas/payment.py
from pydantic import Field
from typing import Optional
from datetime import datetime

from missionboard.constants.statuses import PaymentMethod, PaymentStatus
from missionboard.schemas.base import APIModel
from missionboard.schemas.user import UserSummary


class PaymentCreate(APIModel):
    amount: float = Field(..., gt=0, json_schema_extra={"example": 49.0})
    currency: str = Field("USD", min_length=3, max_length=3)
    user_id: Optional[str] = None
    subscription_id: Optional[str] = None
    status: PaymentStatus = PaymentStatus.COMPLETED
    method: PaymentMethod = PaymentMethod.OTHER
    description: Optional[str] = None


class Payment(APIModel):
    id: str
    organization_id: str
    user_id: Optional[str] = None
    subscription_id: Optional[str] = None
    initiated_by_id: Optional[str] = None
    amount: float
    currency: str
    status: PaymentStatus
    method: PaymentMethod
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    user: Optional[UserSummary] = None
