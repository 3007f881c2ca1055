# arm_backend/models/donation.py
import uuid

from sqlalchemy import Column, String, DateTime, Numeric, Uuid
from sqlalchemy.sql import func

from arm_backend.core.enums import PaymentStatus, ContributionType, Currency
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class Donation(Base):
    __tablename__ = "donations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    donor_name = Column(String, nullable=False)
    donor_email = Column(String, nullable=False)
    amount = Column(Numeric(15, 2), nullable=False)
    currency = Column(String(3), nullable=False, default=Currency.EUR.value)
    payment_method = Column(String, nullable=True)
    status = Column(String(20), default=PaymentStatus.PENDING.value, nullable=False, index=True)
    contribution_type = Column(String(20), default=ContributionType.ONE_TIME.value, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    def __repr__(self):
        return f"<Donation {self.donor_email} {self.amount} {self.currency} {self.status}>"
