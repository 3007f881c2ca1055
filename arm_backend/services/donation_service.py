# arm_backend/services/donation_service.py
import logging
from decimal import Decimal
from typing import Any, Dict, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from arm_backend.core.enums import Currency, PaymentStatus
from arm_backend.models.donation import Donation
from arm_backend.schemas.donation import DonationCreate
from arm_backend.services.currency import BASE_CURRENCY, convert, total_in_base_currency

logger = logging.getLogger(__name__)


class DonationService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: DonationCreate) -> Donation:
        donation = Donation(
            donor_name=data.donor_name,
            donor_email=data.donor_email.lower(),
            amount=data.amount,
            currency=data.currency.value,
            payment_method=data.payment_method,
            contribution_type=data.contribution_type.value,
            status=PaymentStatus.PENDING.value,
        )
        self.db.add(donation)
        await self.db.commit()
        logger.info(f"Donation {donation.id} recorded: {data.amount} {data.currency.value}")
        return donation

    async def list(self) -> List[Donation]:
        result = await self.db.execute(select(Donation).order_by(Donation.created_at))
        return list(result.scalars().all())

    async def stats(self, currency: Currency = BASE_CURRENCY) -> Dict[str, Any]:
        """
        Totals over all donations.

        Each completed donation is converted to EUR from the currency it
        was recorded in; the EUR total is then converted to the requested
        display currency.
        """
        donations = await self.list()
        completed = [d for d in donations if d.status == PaymentStatus.COMPLETED.value]
        total: Decimal = total_in_base_currency(completed)
        if currency != BASE_CURRENCY:
            total = convert(total, BASE_CURRENCY.value, currency.value)

        return {
            "total_amount": total,
            "donation_count": len(donations),
            "completed_count": len(completed),
            "pending_count": sum(1 for d in donations if d.status == PaymentStatus.PENDING.value),
            "currency": currency,
        }
