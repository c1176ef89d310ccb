# missionboard/crud/crud_payment.py
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from missionboard.models.payment import Payment
from missionboard.models.user import User
from missionboard.schemas.payment import PaymentCreate
from missionboard.constants.statuses import PaymentStatus
from missionboard.crud.crud_user import user as crud_user


class CRUDPayment(CRUDBase[Payment, PaymentCreate, PaymentCreate]):
    def get_multi_by_organization(
        self, db: Session, *, org_id: str, skip: int = 0, limit: int = 100
    ) -> list[Payment]:
        return (
            db.query(self.model)
            .options(joinedload(self.model.user))
            .filter(self.model.organization_id == org_id)
            .order_by(self.model.created_at.desc(), self.model.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_for_organization(
        self,
        db: Session,
        *,
        obj_in: PaymentCreate,
        org_id: str,
        initiated_by_id: str | None,
        payer: User | None = None,
    ) -> Payment:
        """
        Records the payment and, for a completed payment with a known payer,
        stamps the payer's last payment time in the same transaction.
        """
        db_obj = self.model(
            **obj_in.model_dump(),
            organization_id=org_id,
            initiated_by_id=initiated_by_id,
        )
        db.add(db_obj)
        if payer is not None and db_obj.status == PaymentStatus.COMPLETED.value:
            crud_user.mark_paid(db, user=payer)
        db.commit()
        db.refresh(db_obj)
        return db_obj


payment = CRUDPayment(Payment)
