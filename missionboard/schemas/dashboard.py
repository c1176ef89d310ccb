# missionboard/schemas/dashboard.py
from missionboard.schemas.base import APIModel


class DashboardStats(APIModel):
    total_members: int
    active_subscriptions: int
    upcoming_events: int
    total_revenue: float
