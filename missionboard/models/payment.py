# missionboard/models/payment.py
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Text, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base
from missionboard.constants.statuses import PaymentMethod, PaymentStatus


class Payment(Base):
    __tablename__ = "payments"

    id = Column(
        String, primary_key=True, default=lambda: f"pay_{uuid.uuid4().hex[:12]}"
    )
    organization_id = Column(
        String, ForeignKey("organizations.id"), nullable=False, index=True
    )
    user_id = Column(
        String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    subscription_id = Column(
        String, ForeignKey("subscriptions.id", ondelete="SET NULL"), nullable=True, index=True
    )
    initiated_by_id = Column(String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True)

    amount = Column(Numeric(10, 2, asdecimal=False), nullable=False)
    currency = Column(String(3), nullable=False, default="USD")
    status = Column(String(20), nullable=False, default=PaymentStatus.COMPLETED.value)
    method = Column(String(20), nullable=False, default=PaymentMethod.OTHER.value)
    description = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    user = relationship("User", foreign_keys=[user_id])
    initiated_by = relationship("User", foreign_keys=[initiated_by_id])
    subscription = relationship("Subscription", back_populates="payments")
