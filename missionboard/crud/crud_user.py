# missionboard/crud/crud_user.py
from sqlalchemy import func
from sqlalchemy.orm import Session, joinedload

from .base import CRUDBase
from missionboard.models.user import User
from missionboard.models.registration import EventRegistration
from missionboard.models.subscription import Subscription
from missionboard.schemas.user import MemberCreate, MemberUpdate
from missionboard.constants.statuses import MemberRole, MemberStatus
from missionboard.utils.dates import utcnow


class CRUDUser(CRUDBase[User, MemberCreate, MemberUpdate]):
    def get_by_email(self, db: Session, *, email: str) -> User | None:
        # Emails are matched case-insensitively
        return (
            db.query(self.model)
            .filter(func.lower(self.model.email) == email.strip().lower())
            .first()
        )

    def get_in_organization(self, db: Session, *, id: str, org_id: str) -> User | None:
        return (
            db.query(self.model)
            .filter(self.model.id == id, self.model.organization_id == org_id)
            .first()
        )

    def get_detail(self, db: Session, *, id: str, org_id: str) -> User | None:
        """Loads a member together with their subscriptions and plans."""
        return (
            db.query(self.model)
            .options(joinedload(self.model.subscriptions).joinedload(Subscription.plan))
            .filter(self.model.id == id, self.model.organization_id == org_id)
            .first()
        )

    def get_multi_by_organization(
        self, db: Session, *, org_id: str, skip: int = 0, limit: int = 100
    ) -> list[User]:
        return (
            db.query(self.model)
            .filter(self.model.organization_id == org_id)
            .order_by(self.model.created_at.desc(), self.model.id)
            .offset(skip)
            .limit(limit)
            .all()
        )

    def create_for_organization(
        self, db: Session, *, obj_in: MemberCreate, org_id: str
    ) -> User:
        data = obj_in.model_dump()
        data["email"] = data["email"].lower()
        db_obj = self.model(**data, organization_id=org_id)
        db.add(db_obj)
        db.commit()
        db.refresh(db_obj)
        return db_obj

    def get_or_create_public_registrant(
        self,
        db: Session,
        *,
        email: str,
        name: str,
        phone: str | None,
        org_id: str,
    ) -> tuple[User, bool]:
        """
        Finds the user behind a public registration, creating a pending member
        of the event's organization when the email has not been seen before.

        Flushes but does not commit; the caller owns the transaction.
        """
        user = self.get_by_email(db, email=email)
        if user:
            return user, False
        user = self.model(
            name=name,
            email=email.strip().lower(),
            phone_number=phone,
            status=MemberStatus.pending.value,
            role=MemberRole.MEMBER.value,
            organization_id=org_id,
        )
        db.add(user)
        db.flush()
        return user, True

    def has_history(self, db: Session, *, user_id: str) -> bool:
        """True when the user has any event registration or subscription."""
        if (
            db.query(EventRegistration.id)
            .filter(EventRegistration.user_id == user_id)
            .first()
            is not None
        ):
            return True
        return (
            db.query(Subscription.id).filter(Subscription.user_id == user_id).first()
            is not None
        )

    def mark_paid(self, db: Session, *, user: User) -> None:
        """Stamps the last payment time; committed with the payment."""
        user.last_payment = utcnow()
        db.add(user)


user = CRUDUser(User)
