# arm_backend/models/election.py
import uuid

from sqlalchemy import Column, String, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from arm_backend.core.enums import ElectionResultStatus
from arm_backend.core.utils import utcnow
from arm_backend.database import Base, JSONVariant


class ElectionResult(Base):
    """Polling station results (PV) submitted by a member acting as sentinel."""
    __tablename__ = "election_results"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    member_id = Column(Uuid, ForeignKey("member_profiles.id", ondelete="CASCADE"), nullable=False, index=True)
    election_type = Column(String, nullable=False)
    region = Column(String, nullable=False)
    cercle = Column(String, nullable=False)
    commune = Column(String, nullable=False)
    bureau_vote = Column(String, nullable=False)
    results_data = Column(JSONVariant, nullable=False)  # {"candidate": votes, ...}
    pv_photo_url = Column(String, nullable=True)
    submitted_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)
    verified_by = Column(String, nullable=True)
    verified_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(String(20), default=ElectionResultStatus.PENDING.value, nullable=False, index=True)

    member = relationship("MemberProfile", back_populates="election_results")

    def __repr__(self):
        return f"<ElectionResult {self.election_type} {self.bureau_vote} {self.status}>"
