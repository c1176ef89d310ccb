# missionboard/schemas/plan.py
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from missionboard.constants.statuses import BillingInterval
from missionboard.schemas.base import APIModel, PartialUpdate


class PlanCreate(APIModel):
    name: str = Field(..., min_length=1, json_schema_extra={"example": "Annual Family"})
    description: Optional[str] = None
    price: float = Field(..., gt=0)
    currency: str = Field("USD", min_length=3, max_length=3)
    interval: BillingInterval
    features: List[str] = []
    active: bool = True


class PlanUpdate(PartialUpdate):
    required_fields = ("name", "price", "currency", "interval", "features", "active")

    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, gt=0)
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    interval: Optional[BillingInterval] = None
    features: Optional[List[str]] = None
    active: Optional[bool] = None


class Plan(APIModel):
    id: str
    organization_id: str
    name: str
    description: Optional[str] = None
    price: float
    currency: str
    interval: BillingInterval
    features: List[str] = []
    active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
