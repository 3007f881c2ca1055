"""
Shared enums and constants used across the application.
"""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Status of a legacy membership application"""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class MemberStatus(str, Enum):
    """Status of a member profile"""
    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"


class MemberRole(str, Enum):
    MILITANT = "militant"
    COLLECTEUR = "collecteur"
    SUPERVISEUR = "superviseur"
    ADMINISTRATEUR = "administrateur"


class PaymentStatus(str, Enum):
    """Shared by donations and cotisations"""
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"


class ContributionType(str, Enum):
    ONE_TIME = "one-time"
    MONTHLY = "monthly"
    ANNUAL = "annual"


class CotisationPaymentMethod(str, Enum):
    SAMA_MONEY = "sama_money"
    ORANGE_MONEY = "orange_money"
    MOOV_MONEY = "moov_money"
    BANK_TRANSFER = "bank_transfer"


class MessageStatus(str, Enum):
    UNREAD = "unread"
    READ = "read"
    REPLIED = "replied"


class ConferenceStatus(str, Enum):
    SCHEDULED = "scheduled"
    ACTIVE = "active"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ElectionResultStatus(str, Enum):
    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"


class Currency(str, Enum):
    XOF = "XOF"
    EUR = "EUR"
    USD = "USD"
    GBP = "GBP"
