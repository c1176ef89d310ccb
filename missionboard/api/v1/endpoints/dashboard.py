# missionboard/api/v1/endpoints/dashboard.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from missionboard.schemas.dashboard import DashboardStats
from missionboard.schemas.token import TokenPayload
from missionboard.api import deps
from missionboard.db.session import get_db
from missionboard.crud import crud_dashboard

router = APIRouter(tags=["Dashboard"])


@router.get("/organizations/{orgId}/dashboard/stats", response_model=DashboardStats)
def get_dashboard_stats(
    orgId: str,
    db: Session = Depends(get_db),
    current_user: TokenPayload = Depends(deps.get_current_user),
):
    deps.check_org_access(orgId, current_user)
    return crud_dashboard.dashboard.get_stats(db, org_id=orgId)
