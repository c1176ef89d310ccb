# missionboard/api/v1/endpoints/organizations.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from missionboard.schemas.organization import (
    OrganizationSettings,
    OrganizationSettingsUpdate,
)
from missionboard.schemas.token import TokenPayload
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_organization

router = APIRouter(tags=["Organizations"])


@router.get("/organizations/{orgId}/settings", response_model=OrganizationSettings)
def get_organization_settings(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    """The organization's settings, or empty defaults before the first save."""
    deps.check_org_access(orgId, current_user)
    organization = crud_organization.organization.get(db, id=orgId)
    if organization is None:
        return OrganizationSettings()
    return organization


@router.put("/organizations/{orgId}/settings", response_model=OrganizationSettings)
def upsert_organization_settings(
    orgId: str,
    settings_in: OrganizationSettingsUpdate,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    return crud_organization.organization.upsert_settings(
        db, org_id=orgId, obj_in=settings_in, admin_id=current_user.sub
    )
