# arm_backend/models/cotisation.py
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Numeric, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from arm_backend.core.enums import PaymentStatus
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class Cotisation(Base):
    """A membership fee payment (mobile money or bank transfer)."""
    __tablename__ = "cotisations"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Uuid, ForeignKey("member_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    amount = Column(Numeric(15, 2), nullable=False)
    type = Column(String(20), nullable=False)  # monthly, annual, one-time
    payment_method = Column(String(30), nullable=False)
    transaction_id = Column(String, nullable=True)
    status = Column(String(20), default=PaymentStatus.PENDING.value, nullable=False, index=True)
    paid_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    member = relationship("MemberProfile", back_populates="cotisations")

    def __repr__(self):
        return f"<Cotisation {self.id} {self.amount} {self.status}>"
