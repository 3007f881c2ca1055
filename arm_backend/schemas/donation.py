"""
Schemas for donations and currency conversion.
"""
import uuid
from decimal import Decimal
from typing import Dict, Optional

from pydantic import EmailStr, Field

from arm_backend.core.enums import ContributionType, Currency, PaymentStatus
from .base import BaseSchema, Money, UtcDatetime


class DonationCreate(BaseSchema):
    donor_name: str = Field(min_length=1)
    donor_email: EmailStr
    amount: Decimal = Field(gt=0, max_digits=15, decimal_places=2)
    currency: Currency = Currency.EUR
    payment_method: Optional[str] = None
    contribution_type: ContributionType = ContributionType.ONE_TIME


class DonationRead(BaseSchema):
    id: uuid.UUID
    donor_name: str
    donor_email: str
    amount: Money
    currency: str
    payment_method: Optional[str] = None
    status: PaymentStatus
    contribution_type: ContributionType
    created_at: UtcDatetime


class DonationStats(BaseSchema):
    total_amount: Money
    donation_count: int
    completed_count: int
    pending_count: int
    currency: Currency


class CurrencyInfo(BaseSchema):
    code: Currency
    symbol: str
    name: str
    rate: Decimal
    names: Dict[str, str]
    local_name: str


class ConversionResult(BaseSchema):
    amount: Money
    from_currency: Currency = Field(alias="from")
    to_currency: Currency = Field(alias="to")
    converted_amount: Money
    formatted: str
