# missionboard/models/organization.py
import uuid
from sqlalchemy import Column, String, DateTime, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base


class Organization(Base):
    __tablename__ = "organizations"

    id = Column(
        String, primary_key=True, default=lambda: f"org_{uuid.uuid4().hex[:12]}"
    )
    name = Column(String, nullable=False)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    website = Column(String, nullable=True)

    # One organization per admin user
    admin_id = Column(String, nullable=True, unique=True, index=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    members = relationship(
        "User", back_populates="organization", foreign_keys="User.organization_id"
    )
    events = relationship("Event", back_populates="organization")
