# missionboard/models/event.py
import uuid
from sqlalchemy import Column, Integer, String, DateTime, Boolean, ForeignKey, Text, func
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base
from missionboard.constants.statuses import EventStatus


class Event(Base):
    __tablename__ = "events"

    id = Column(
        String, primary_key=True, default=lambda: f"evt_{uuid.uuid4().hex[:12]}"
    )
    organization_id = Column(
        String, ForeignKey("organizations.id"), nullable=False, index=True
    )
    organizer_id = Column(
        String, ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    date = Column(DateTime(timezone=True), nullable=False, index=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
    location = Column(String, nullable=True)
    location_details = Column(String, nullable=True)
    # NULL means unlimited
    capacity = Column(Integer, nullable=True)
    is_private = Column(Boolean, nullable=False, default=False)
    registration_deadline = Column(DateTime(timezone=True), nullable=True)
    status = Column(String, nullable=False, default=EventStatus.SCHEDULED.value)

    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )

    organization = relationship("Organization", back_populates="events")
    organizer = relationship("User", foreign_keys=[organizer_id])
    # Deleting an event removes its registrations
    registrations = relationship(
        "EventRegistration",
        back_populates="event",
        cascade="all, delete-orphan",
    )
