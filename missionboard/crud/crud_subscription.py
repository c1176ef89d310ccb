# missionboard/crud/crud_subscription.py
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from missionboard.models.subscription import Subscription
from missionboard.schemas.subscription import SubscriptionCreate, SubscriptionUpdate


class CRUDSubscription(CRUDBase[Subscription, SubscriptionCreate, SubscriptionUpdate]):
    def get_in_organization(
        self, db: Session, *, id: str, org_id: str
    ) -> Subscription | None:
        return (
            db.query(self.model)
            .options(joinedload(self.model.user), joinedload(self.model.plan))
            .filter(self.model.id == id, self.model.organization_id == org_id)
            .first()
        )

    def get_multi_by_organization(
        self, db: Session, *, org_id: str, skip: int = 0, limit: int = 100
    ) -> list[Subscription]:
        return (
            db.query(self.model)
            .options(joinedload(self.model.user), joinedload(self.model.plan))
            .filter(self.model.organization_id == org_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )


subscription = CRUDSubscription(Subscription)
