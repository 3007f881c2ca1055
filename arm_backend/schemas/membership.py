"""
Schemas for membership applications, member profiles and cotisations.
"""
import uuid
from decimal import Decimal
from typing import Any, Dict, List, Optional

from pydantic import EmailStr, Field, field_validator

from arm_backend.core.enums import (
    ApplicationStatus,
    ContributionType,
    CotisationPaymentMethod,
    MemberRole,
    MemberStatus,
    PaymentStatus,
)
from .base import BaseSchema, Money, UtcDatetime, not_null


# Legacy applications

class MembershipApplicationCreate(BaseSchema):
    name: str = Field(min_length=1)
    email: EmailStr
    phone: str = Field(min_length=1)
    region: str = Field(min_length=1)
    cercle: Optional[str] = None
    commune: Optional[str] = None


class MembershipApplicationRead(BaseSchema):
    id: uuid.UUID
    name: str
    email: str
    phone: str
    region: str
    cercle: Optional[str] = None
    commune: Optional[str] = None
    membership_date: UtcDatetime
    status: ApplicationStatus


class MembershipStatusUpdate(BaseSchema):
    status: ApplicationStatus

    @field_validator('status')
    @classmethod
    def decided(cls, v):
        if v == ApplicationStatus.PENDING:
            raise ValueError('Status must be approved or rejected')
        return v


# Member profiles

class MemberRegisterRequest(BaseSchema):
    full_name: str = Field(min_length=1)
    nina: Optional[str] = None
    commune: str = Field(min_length=1)
    profession: str = Field(min_length=1)
    phone: str = Field(min_length=1)
    email: Optional[EmailStr] = None


class MemberProfileUpdate(BaseSchema):
    """Fields a member may change on their own profile."""
    full_name: Optional[str] = Field(default=None, min_length=1)
    nina: Optional[str] = None
    commune: Optional[str] = Field(default=None, min_length=1)
    profession: Optional[str] = Field(default=None, min_length=1)
    phone: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None

    check_not_null = not_null("full_name", "commune", "profession", "phone")


class MemberProfileRead(BaseSchema):
    id: uuid.UUID
    user_id: Optional[str] = None
    full_name: str
    nina: Optional[str] = None
    commune: str
    profession: str
    phone: str
    email: Optional[str] = None
    membership_number: str
    qr_code: str
    status: MemberStatus
    role: MemberRole
    created_at: UtcDatetime
    updated_at: UtcDatetime


class MemberRegisterResponse(BaseSchema):
    member: MemberProfileRead
    membership_number: str
    qr_code: str


class MemberCard(BaseSchema):
    membership_number: str
    full_name: str
    status: MemberStatus
    qr_code: str
    commune: str


class MemberRoleUpdate(BaseSchema):
    role: MemberRole


class MemberStatusUpdate(BaseSchema):
    status: MemberStatus

    @field_validator('status')
    @classmethod
    def not_pending(cls, v):
        if v == MemberStatus.PENDING:
            raise ValueError('Status must be active or suspended')
        return v


# Cotisations

class CotisationInitiateRequest(BaseSchema):
    amount: Decimal = Field(gt=0, max_digits=15, decimal_places=2)
    type: ContributionType
    payment_method: CotisationPaymentMethod


class PaymentInstructions(BaseSchema):
    instructions: str
    details: Dict[str, Any]


class CotisationInitiateResponse(BaseSchema):
    cotisation_id: uuid.UUID
    payment_instructions: PaymentInstructions


class CotisationConfirmRequest(BaseSchema):
    cotisation_id: uuid.UUID
    transaction_id: str = Field(min_length=1)


class CotisationRead(BaseSchema):
    id: uuid.UUID
    member_id: uuid.UUID
    amount: Money
    type: ContributionType
    payment_method: CotisationPaymentMethod
    transaction_id: Optional[str] = None
    status: PaymentStatus
    paid_at: Optional[UtcDatetime] = None
    created_at: UtcDatetime


class RecentSignup(BaseSchema):
    type: str = "member_signup"
    name: str
    timestamp: UtcDatetime


class MemberStatistics(BaseSchema):
    total_members: int
    active_members: int
    pending_members: int
    total_cotisations: Money
    monthly_revenue: Money
    members_by_region: Dict[str, int]
    members_by_role: Dict[str, int]
    recent_activity: List[RecentSignup]
