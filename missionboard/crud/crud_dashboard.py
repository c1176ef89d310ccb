# missionboard/crud/crud_dashboard.py
from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from missionboard.models.event import Event
from missionboard.models.payment import Payment
from missionboard.models.subscription import Subscription
from missionboard.models.user import User
from missionboard.constants.statuses import EventStatus, PaymentStatus, SubscriptionStatus
from missionboard.utils.dates import end_of_month, utcnow


class CRUDDashboard:
    def get_stats(self, db: Session, *, org_id: str, now: datetime | None = None) -> dict:
        """
        Headline numbers for the organization dashboard.

        `upcoming_events` counts scheduled events between now and the end of
        the current month.
        """
        now = now or utcnow()

        total_members = (
            db.query(func.count(User.id)).filter(User.organization_id == org_id).scalar()
        )
        active_subscriptions = (
            db.query(func.count(Subscription.id))
            .filter(
                Subscription.organization_id == org_id,
                Subscription.status == SubscriptionStatus.ACTIVE.value,
            )
            .scalar()
        )
        upcoming_events = (
            db.query(func.count(Event.id))
            .filter(
                Event.organization_id == org_id,
                Event.status == EventStatus.SCHEDULED.value,
                Event.date >= now,
                Event.date <= end_of_month(now),
            )
            .scalar()
        )
        total_revenue = (
            db.query(func.coalesce(func.sum(Payment.amount), 0))
            .filter(
                Payment.organization_id == org_id,
                Payment.status == PaymentStatus.COMPLETED.value,
            )
            .scalar()
        )

        return {
            "total_members": total_members or 0,
            "active_subscriptions": active_subscriptions or 0,
            "upcoming_events": upcoming_events or 0,
            "total_revenue": float(total_revenue or 0),
        }


dashboard = CRUDDashboard()
