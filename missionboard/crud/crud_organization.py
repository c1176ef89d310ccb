# missionboard/crud/crud_organization.py
from sqlalchemy.orm import Session

from .base import CRUDBase
from missionboard.models.organization import Organization
from missionboard.schemas.organization import OrganizationSettingsUpdate


class CRUDOrganization(
    CRUDBase[Organization, OrganizationSettingsUpdate, OrganizationSettingsUpdate]
):
    def upsert_settings(
        self,
        db: Session,
        *,
        org_id: str,
        obj_in: OrganizationSettingsUpdate,
        admin_id: str | None = None,
    ) -> Organization:
        """
        Creates the organization row on first save, otherwise updates it.
        """
        db_obj = self.get(db, id=org_id)
        if db_obj is None:
            return self.create(db, obj_in=obj_in, id=org_id, admin_id=admin_id)
        return self.update(db, db_obj=db_obj, obj_in=obj_in.model_dump(exclude_unset=True))


organization = CRUDOrganization(Organization)
