# missionboard/models/__init__.py
# Import all models so SQLAlchemy can resolve string-based relationships

from missionboard.db.base_class import Base
from missionboard.models.organization import Organization
from missionboard.models.user import User
from missionboard.models.event import Event
from missionboard.models.registration import EventRegistration
from missionboard.models.plan import MembershipPlan
from missionboard.models.subscription import Subscription
from missionboard.models.payment import Payment

__all__ = [
    "Base",
    "Organization",
    "User",
    "Event",
    "EventRegistration",
    "MembershipPlan",
    "Subscription",
    "Payment",
]
