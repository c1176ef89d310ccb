# missionboard/api/v1/endpoints/payments.py
import logging
from typing import List
from fastapi import APIRouter, Depends, status, Query
from sqlalchemy.orm import Session

from missionboard.schemas.payment import Payment, PaymentCreate
from missionboard.schemas.token import TokenPayload
from missionboard.models.organization import Organization
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_payment, crud_subscription, crud_user
from missionboard.middleware.error_handler import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Payments"])


@router.get("/organizations/{orgId}/payments", response_model=List[Payment])
def list_payments(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    """The organization's payments, newest first."""
    deps.check_org_access(orgId, current_user)
    return crud_payment.payment.get_multi_by_organization(
        db, org_id=orgId, skip=skip, limit=limit
    )


@router.post(
    "/organizations/{orgId}/payments",
    response_model=Payment,
    status_code=status.HTTP_201_CREATED,
)
def record_payment(
    payment_in: PaymentCreate,
    db: Session = Depends(get_db),
    organization: Organization = Depends(deps.get_current_organization),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """
    Records a manual payment. A completed payment from a known member also
    updates that member's last payment time.
    """
    payer = None
    if payment_in.user_id:
        payer = crud_user.user.get_in_organization(
            db, id=payment_in.user_id, org_id=organization.id
        )
        if not payer:
            raise NotFoundError("User not found")

    if payment_in.subscription_id:
        subscription = crud_subscription.subscription.get_in_organization(
            db, id=payment_in.subscription_id, org_id=organization.id
        )
        if not subscription:
            raise NotFoundError("Subscription not found")

    payment = crud_payment.payment.create_for_organization(
        db,
        obj_in=payment_in,
        org_id=organization.id,
        initiated_by_id=current_user.sub,
        payer=payer,
    )
    logger.info(
        f"Payment {payment.id} of {payment.amount} {payment.currency} recorded "
        f"for organization {organization.id}"
    )
    return payment
