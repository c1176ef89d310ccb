# missionboard/services/subscription_service.py
import logging

from sqlalchemy.orm import Session

from missionboard.constants.statuses import SubscriptionStatus
from missionboard.crud import crud_plan, crud_subscription, crud_user
from missionboard.middleware.error_handler import ConflictError, NotFoundError
from missionboard.models.plan import MembershipPlan
from missionboard.models.subscription import Subscription
from missionboard.schemas.subscription import SubscriptionCreate, SubscriptionUpdate
from missionboard.services.billing_period import calculate_period
from missionboard.utils.dates import utcnow

logger = logging.getLogger(__name__)


def _get_active_plan(db: Session, *, plan_id: str, org_id: str) -> MembershipPlan:
    plan = crud_plan.plan.get_in_organization(db, id=plan_id, org_id=org_id)
    if plan is None:
        raise NotFoundError("Membership plan not found")
    if not plan.active:
        raise ConflictError("Cannot subscribe to an inactive plan")
    return plan


def create_subscription(
    db: Session, *, obj_in: SubscriptionCreate, org_id: str, managed_by_id: str | None
) -> Subscription:
    """
    Subscribes a member to a plan. The first billing period starts at the
    custom start date (default: now) and is derived from the plan interval.
    """
    user = crud_user.user.get_in_organization(db, id=obj_in.user_id, org_id=org_id)
    if user is None:
        raise NotFoundError("User not found")
    plan = _get_active_plan(db, plan_id=obj_in.plan_id, org_id=org_id)

    period_start, period_end = calculate_period(plan.interval, obj_in.custom_start_date)
    db_obj = Subscription(
        organization_id=org_id,
        user_id=user.id,
        plan_id=plan.id,
        managed_by_id=managed_by_id,
        status=SubscriptionStatus.ACTIVE.value,
        start_date=period_start,
        current_period_start=period_start,
        current_period_end=period_end,
        cancel_at_period_end=False,
    )
    db.add(db_obj)
    db.commit()
    db.refresh(db_obj)
    logger.info(f"Subscribed user {user.id} to plan {plan.id} until {period_end.isoformat()}")
    return db_obj


def update_subscription(
    db: Session, *, db_obj: Subscription, obj_in: SubscriptionUpdate, org_id: str
) -> Subscription:
    update_data = obj_in.model_dump(exclude_unset=True)

    if "plan_id" in update_data and update_data["plan_id"] != db_obj.plan_id:
        _get_active_plan(db, plan_id=update_data["plan_id"], org_id=org_id)

    if (
        update_data.get("status") == SubscriptionStatus.CANCELED.value
        and not update_data.get("canceled_at")
    ):
        update_data["canceled_at"] = utcnow()

    return crud_subscription.subscription.update(db, db_obj=db_obj, obj_in=update_data)
