# arm_backend/models/member_profile.py
import uuid

from sqlalchemy import Column, String, DateTime, Text, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from arm_backend.core.enums import MemberStatus, MemberRole
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class MemberProfile(Base):
    """
    A registered party member linked to a user account.

    Carries the membership number (ARM-YYYY-NNNNN) and the QR code printed
    on the member card.
    """
    __tablename__ = "member_profiles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(String, nullable=True, index=True)
    full_name = Column(String, nullable=False)
    nina = Column(String, nullable=True)  # National ID number
    commune = Column(String, nullable=False, index=True)
    profession = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    email = Column(String, nullable=True)
    membership_number = Column(String(32), nullable=False, unique=True)
    qr_code = Column(Text, nullable=False)  # PNG data URL, not unique
    status = Column(String(20), default=MemberStatus.PENDING.value, nullable=False, index=True)
    role = Column(String(20), default=MemberRole.MILITANT.value, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, server_default=func.now(), nullable=False)

    cotisations = relationship("Cotisation", back_populates="member", cascade="all, delete-orphan", passive_deletes=True)
    election_results = relationship("ElectionResult", back_populates="member", cascade="all, delete-orphan", passive_deletes=True)

    def __repr__(self):
        return f"<MemberProfile {self.membership_number} {self.full_name}>"
