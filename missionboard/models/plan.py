# missionboard/models/plan.py
import uuid
from sqlalchemy import Column, String, Boolean, DateTime, ForeignKey, Numeric, Text, JSON, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base


class MembershipPlan(Base):
    __tablename__ = "membership_plans"

    id = Column(
        String, primary_key=True, default=lambda: f"plan_{uuid.uuid4().hex[:12]}"
    )
    organization_id = Column(
        String, ForeignKey("organizations.id"), nullable=False, index=True
    )
    created_by_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    interval = Column(String(20), nullable=False)
    features = Column(JSON, nullable=False, default=list)
    active = Column(Boolean, nullable=False, default=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    subscriptions = relationship("Subscription", back_populates="plan")
