# missionboard/constants/statuses.py
"""
Status and enumeration values stored in the database.

Columns store the plain string value; schemas validate against these enums.
"""

from enum import Enum


class EventStatus(str, Enum):
    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"
    ARCHIVED = "ARCHIVED"
    CANCELED = "CANCELED"


class RegistrationStatus(str, Enum):
    CONFIRMED = "CONFIRMED"
    ATTENDED = "ATTENDED"
    WAITLISTED = "WAITLISTED"
    CANCELED_BY_USER = "CANCELED_BY_USER"
    CANCELED_BY_ADMIN = "CANCELED_BY_ADMIN"

    @classmethod
    def seat_holding(cls) -> list[str]:
        """Statuses that occupy seats against the event capacity."""
        return [cls.CONFIRMED.value, cls.ATTENDED.value]

    @classmethod
    def canceled(cls) -> list[str]:
        return [cls.CANCELED_BY_USER.value, cls.CANCELED_BY_ADMIN.value]

    @classmethod
    def is_canceled(cls, status: str) -> bool:
        return status in cls.canceled()


class MemberStatus(str, Enum):
    active = "active"
    pending = "pending"
    inactive = "inactive"
    cancelled = "cancelled"


class MemberRole(str, Enum):
    ADMIN = "ADMIN"
    MEMBER = "MEMBER"


class BillingInterval(str, Enum):
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class SubscriptionStatus(str, Enum):
    ACTIVE = "ACTIVE"
    CANCELED = "CANCELED"
    PAST_DUE = "PAST_DUE"
    INCOMPLETE = "INCOMPLETE"
    TRIALING = "TRIALING"


class PaymentStatus(str, Enum):
    COMPLETED = "COMPLETED"
    PENDING = "PENDING"
    FAILED = "FAILED"


class PaymentMethod(str, Enum):
    CREDIT = "CREDIT"
    BANK = "BANK"
    CASH = "CASH"
    OTHER = "OTHER"
