# missionboard/models/user.py
import uuid
from sqlalchemy import Column, String, DateTime, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base
from missionboard.constants.statuses import MemberRole, MemberStatus


class User(Base):
    """A person known to an organization: admins and members alike."""

    __tablename__ = "users"

    id = Column(
        String, primary_key=True, default=lambda: f"usr_{uuid.uuid4().hex[:12]}"
    )
    organization_id = Column(
        String, ForeignKey("organizations.id"), nullable=True, index=True
    )
    name = Column(String, nullable=True)
    email = Column(String, nullable=True, unique=True, index=True)
    phone_number = Column(String, nullable=True)
    status = Column(String, nullable=False, default=MemberStatus.active.value)
    role = Column(String, nullable=False, default=MemberRole.MEMBER.value)
    join_date = Column(DateTime(timezone=True), server_default=func.now())
    last_payment = Column(DateTime(timezone=True), nullable=True)
    notes = Column(Text, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    organization = relationship(
        "Organization", back_populates="members", foreign_keys=[organization_id]
    )
    # Users with registrations or subscriptions are not deleted; see has_history
    registrations = relationship("EventRegistration", back_populates="user")
    subscriptions = relationship(
        "Subscription",
        back_populates="user",
        foreign_keys="Subscription.user_id",
    )
