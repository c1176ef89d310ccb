# missionboard/models/registration.py
import uuid
from datetime import datetime, timezone
from sqlalchemy import (
    Column,
    String,
    Integer,
    ForeignKey,
    DateTime,
    Text,
    UniqueConstraint,
    Index,
)
from sqlalchemy.orm import relationship
from missionboard.db.base_class import Base
from missionboard.constants.statuses import RegistrationStatus


class EventRegistration(Base):
    __tablename__ = "event_registrations"
    __table_args__ = (
        UniqueConstraint("event_id", "user_id", name="uq_event_registration_user"),
        Index("idx_registration_event_status", "event_id", "status"),
    )

    id = Column(
        String, primary_key=True, default=lambda: f"reg_{uuid.uuid4().hex[:12]}"
    )
    event_id = Column(
        String, ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True
    )
    user_id = Column(String, ForeignKey("users.id"), nullable=False, index=True)
    status = Column(
        String, nullable=False, default=RegistrationStatus.CONFIRMED.value
    )
    # Additional attendees beyond the registrant
    guests_count = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    # Set client-side so waitlist ordering keeps sub-second precision
    registration_date = Column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    event = relationship("Event", back_populates="registrations")
    user = relationship("User", back_populates="registrations")

    @property
    def seats(self) -> int:
        return 1 + (self.guests_count or 0)
