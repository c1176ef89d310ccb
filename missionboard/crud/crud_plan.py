# missionboard/crud/crud_plan.py
from sqlalchemy.orm import Session

from .base import CRUDBase
from missionboard.models.plan import MembershipPlan
from missionboard.models.subscription import Subscription
from missionboard.schemas.plan import PlanCreate, PlanUpdate


class CRUDPlan(CRUDBase[MembershipPlan, PlanCreate, PlanUpdate]):
    def get_in_organization(
        self, db: Session, *, id: str, org_id: str
    ) -> MembershipPlan | None:
        return (
            db.query(self.model)
            .filter(self.model.id == id, self.model.organization_id == org_id)
            .first()
        )

    def get_multi_by_organization(
        self, db: Session, *, org_id: str, skip: int = 0, limit: int = 100
    ) -> list[MembershipPlan]:
        return (
            db.query(self.model)
            .filter(self.model.organization_id == org_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def has_subscriptions(self, db: Session, *, plan_id: str) -> bool:
        return (
            db.query(Subscription.id).filter(Subscription.plan_id == plan_id).first()
            is not None
        )


plan = CRUDPlan(MembershipPlan)
