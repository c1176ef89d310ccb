# missionboard/api/v1/api.py

from fastapi import APIRouter
from missionboard.api.v1.endpoints import (
    dashboard,
    events,
    health,
    members,
    organizations,
    payments,
    plans,
    public,
    registrations,
    subscriptions,
)

# Main router for the v1 API; mounted under /api/v1 in main.py
api_router = APIRouter()

api_router.include_router(health.router)
api_router.include_router(public.router)
api_router.include_router(events.router)
api_router.include_router(registrations.router)
api_router.include_router(members.router)
api_router.include_router(plans.router)
api_router.include_router(subscriptions.router)
api_router.include_router(payments.router)
api_router.include_router(organizations.router)
api_router.include_router(dashboard.router)
