# arm_backend/models/member.py
import uuid

from sqlalchemy import Column, String, DateTime, Uuid
from sqlalchemy.sql import func

from arm_backend.core.enums import ApplicationStatus
from arm_backend.core.utils import utcnow
from arm_backend.database import Base


class Member(Base):
    """
    A membership application submitted from the public sign-up form.

    Predates member profiles (see MemberProfile) and is still what the
    analytics overview counts.
    """
    __tablename__ = "members"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)
    phone = Column(String, nullable=False)
    region = Column(String, nullable=False, index=True)
    cercle = Column(String, nullable=True)
    commune = Column(String, nullable=True)
    membership_date = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    status = Column(String(20), default=ApplicationStatus.PENDING.value, nullable=False, index=True)

    def __repr__(self):
        return f"<Member {self.email} status={self.status}>"
