# missionboard/api/v1/endpoints/members.py
import logging
from typing import List
from fastapi import APIRouter, Depends, status, Query, Response
from sqlalchemy.orm import Session

from missionboard.schemas.user import Member, MemberCreate, MemberDetail, MemberUpdate
from missionboard.schemas.token import TokenPayload
from missionboard.models.organization import Organization
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_user
from missionboard.middleware.error_handler import ConflictError, NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Members"])


@router.get("/organizations/{orgId}/members", response_model=List[Member])
def list_members(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
):
    deps.check_org_access(orgId, current_user)
    return crud_user.user.get_multi_by_organization(db, org_id=orgId, skip=skip, limit=limit)


@router.post(
    "/organizations/{orgId}/members",
    response_model=Member,
    status_code=status.HTTP_201_CREATED,
)
def create_member(
    member_in: MemberCreate,
    db: Session = Depends(get_db),
    organization: Organization = Depends(deps.get_current_organization),
):
    if crud_user.user.get_by_email(db, email=member_in.email):
        raise ConflictError("A user with this email already exists")
    member = crud_user.user.create_for_organization(
        db, obj_in=member_in, org_id=organization.id
    )
    logger.info(f"Member {member.id} added to organization {organization.id}")
    return member


@router.get("/organizations/{orgId}/members/{memberId}", response_model=MemberDetail)
def get_member(
    orgId: str,
    memberId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """A member with their subscriptions and the plan behind each."""
    deps.check_org_access(orgId, current_user)
    member = crud_user.user.get_detail(db, id=memberId, org_id=orgId)
    if not member:
        raise NotFoundError("User not found")
    return member


@router.patch("/organizations/{orgId}/members/{memberId}", response_model=Member)
def update_member(
    orgId: str,
    memberId: str,
    member_in: MemberUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    deps.require_admin(current_user)

    member = crud_user.user.get_in_organization(db, id=memberId, org_id=orgId)
    if not member:
        raise NotFoundError("User not found")

    update_data = member_in.model_dump(exclude_unset=True)
    if update_data.get("email"):
        update_data["email"] = update_data["email"].lower()
        existing = crud_user.user.get_by_email(db, email=update_data["email"])
        if existing and existing.id != member.id:
            raise ConflictError("A user with this email already exists")

    return crud_user.user.update(db, db_obj=member, obj_in=update_data)


@router.delete(
    "/organizations/{orgId}/members/{memberId}",
    status_code=status.HTTP_204_NO_CONTENT,
)
def delete_member(
    orgId: str,
    memberId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    deps.require_admin(current_user)

    member = crud_user.user.get_in_organization(db, id=memberId, org_id=orgId)
    if not member:
        raise NotFoundError("User not found")
    if crud_user.user.has_history(db, user_id=memberId):
        raise ConflictError(
            "Cannot delete a member with event registrations or subscriptions. "
            "Set their status to inactive instead."
        )
    crud_user.user.remove(db, id=memberId)
    logger.info(f"Member {memberId} removed by {current_user.sub}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
