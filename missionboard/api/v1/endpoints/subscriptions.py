# missionboard/api/v1/endpoints/subscriptions.py
from typing import List
from fastapi import APIRouter, Depends, status, Query, Response
from sqlalchemy.orm import Session

from missionboard.schemas.subscription import (
    Subscription as SubscriptionSchema,
    SubscriptionCreate,
    SubscriptionUpdate,
    SubscriptionWithRelations,
)
from missionboard.schemas.token import TokenPayload
from missionboard.models.organization import Organization
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_subscription
from missionboard.middleware.error_handler import NotFoundError
from missionboard.services import subscription_service

router = APIRouter(tags=["Subscriptions"])


def _get_subscription_or_404(db: Session, *, subscription_id: str, org_id: str):
    subscription = crud_subscription.subscription.get_in_organization(
        db, id=subscription_id, org_id=org_id
    )
    if not subscription:
        raise NotFoundError("Subscription not found")
    return subscription


@router.get(
    "/organizations/{orgId}/subscriptions",
    response_model=List[SubscriptionWithRelations],
)
def list_subscriptions(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    deps.check_org_access(orgId, current_user)
    return crud_subscription.subscription.get_multi_by_organization(
        db, org_id=orgId, skip=skip, limit=limit
    )


@router.post(
    "/organizations/{orgId}/subscriptions",
    response_model=SubscriptionSchema,
    status_code=status.HTTP_201_CREATED,
)
def create_subscription(
    subscription_in: SubscriptionCreate,
    db: Session = Depends(get_db),
    organization: Organization = Depends(deps.get_current_organization),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """Subscribes a member to an active plan starting now or at `customStartDate`."""
    return subscription_service.create_subscription(
        db,
        obj_in=subscription_in,
        org_id=organization.id,
        managed_by_id=current_user.sub,
    )


@router.get(
    "/organizations/{orgId}/subscriptions/{subscriptionId}",
    response_model=SubscriptionWithRelations,
)
def get_subscription(
    orgId: str,
    subscriptionId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    return _get_subscription_or_404(db, subscription_id=subscriptionId, org_id=orgId)


@router.patch(
    "/organizations/{orgId}/subscriptions/{subscriptionId}",
    response_model=SubscriptionSchema,
)
def update_subscription(
    orgId: str,
    subscriptionId: str,
    subscription_in: SubscriptionUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    subscription = _get_subscription_or_404(
        db, subscription_id=subscriptionId, org_id=orgId
    )
    return subscription_service.update_subscription(
        db, db_obj=subscription, obj_in=subscription_in, org_id=orgId
    )


@router.delete(
    "/organizations/{orgId}/subscriptions/{subscriptionId}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_subscription(
    orgId: str,
    subscriptionId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    _get_subscription_or_404(db, subscription_id=subscriptionId, org_id=orgId)
    crud_subscription.subscription.remove(db, id=subscriptionId)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
