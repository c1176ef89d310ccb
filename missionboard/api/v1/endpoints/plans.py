# missionboard/api/v1/endpoints/plans.py
from typing import List
from fastapi import APIRouter, Depends, status, Response
from sqlalchemy.orm import Session

from missionboard.schemas.plan import Plan, PlanCreate, PlanUpdate
from missionboard.schemas.token import TokenPayload
from missionboard.models.organization import Organization
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_plan
from missionboard.middleware.error_handler import (
    ConflictError,
    NotFoundError,
    ValidationError,
)

router = APIRouter(tags=["Membership Plans"])


def _get_plan_or_404(db: Session, *, plan_id: str, org_id: str):
    plan = crud_plan.plan.get_in_organization(db, id=plan_id, org_id=org_id)
    if not plan:
        raise NotFoundError("Membership plan not found")
    return plan


@router.get("/organizations/{orgId}/plans", response_model=List[Plan])
def list_plans(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """The organization's plans, newest first."""
    deps.check_org_access(orgId, current_user)
    return crud_plan.plan.get_multi_by_organization(db, org_id=orgId)


@router.post(
    "/organizations/{orgId}/plans",
    response_model=Plan,
    status_code=status.HTTP_201_CREATED,
)
def create_plan(
    plan_in: PlanCreate,
    db: Session = Depends(get_db),
    organization: Organization = Depends(deps.get_current_organization),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    return crud_plan.plan.create(
        db, obj_in=plan_in, organization_id=organization.id, created_by_id=current_user.sub
    )


@router.get("/organizations/{orgId}/plans/{planId}", response_model=Plan)
def get_plan(
    orgId: str,
    planId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    return _get_plan_or_404(db, plan_id=planId, org_id=orgId)


@router.patch("/organizations/{orgId}/plans/{planId}", response_model=Plan)
def update_plan(
    orgId: str,
    planId: str,
    plan_in: PlanUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    update_data = plan_in.model_dump(exclude_unset=True)
    if not update_data:
        raise ValidationError("No fields provided for update")

    plan = _get_plan_or_404(db, plan_id=planId, org_id=orgId)
    return crud_plan.plan.update(db, db_obj=plan, obj_in=update_data)


@router.delete(
    "/organizations/{orgId}/plans/{planId}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_plan(
    orgId: str,
    planId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    _get_plan_or_404(db, plan_id=planId, org_id=orgId)
    if crud_plan.plan.has_subscriptions(db, plan_id=planId):
        raise ConflictError(
            "Cannot delete a plan that has subscriptions. Deactivate it instead."
        )
    crud_plan.plan.remove(db, id=planId)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
