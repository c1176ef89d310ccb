# missionboard/models/subscription.py
import uuid
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base
from missionboard.constants.statuses import SubscriptionStatus


class Subscription(Base):
    __tablename__ = "subscriptions"

    id = Column(
        String, primary_key=True, default=lambda: f"sub_{uuid.uuid4().hex[:12]}"
    )
    organization_id = Column(
        String, ForeignKey("organizations.id"), nullable=False, index=True
    )
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    plan_id = Column(String, ForeignKey("membership_plans.id"), nullable=False, index=True)
    managed_by_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    status = Column(String, nullable=False, default=SubscriptionStatus.ACTIVE.value)

    start_date = Column(DateTime(timezone=True), nullable=False)
    current_period_start = Column(DateTime(timezone=True), nullable=False)
    current_period_end = Column(DateTime(timezone=True), nullable=False)
    cancel_at_period_end = Column(Boolean, nullable=False, default=False)
    canceled_at = Column(DateTime(timezone=True), nullable=True)
    trial_start_date = Column(DateTime(timezone=True), nullable=True)
    trial_end_date = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user = relationship("User", back_populates="subscriptions", foreign_keys=[user_id])
    managed_by = relationship("User", foreign_keys=[managed_by_id])
    plan = relationship("MembershipPlan", back_populates="subscriptions")
    payments = relationship("Payment", back_populates="subscription")
