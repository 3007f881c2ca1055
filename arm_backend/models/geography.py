# arm_backend/models/geography.py
import uuid

from sqlalchemy import Column, String, Integer, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from arm_backend.core.utils import utcnow
from arm_backend.database import Base, JSONVariant


class LegacyRegion(Base):
    """
    Region with its cercles and communes embedded as JSON.

    Shape of `cercles`: [{"name": "Kayes", "communes": ["Kayes", "Kita"]}, ...]
    """
    __tablename__ = "regions"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, unique=True)
    cercles = Column(JSONVariant, nullable=False, default=list)

    def __repr__(self):
        return f"<LegacyRegion {self.name}>"


class Region(Base):
    __tablename__ = "regions_table"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False)
    code = Column(String(20), nullable=False, unique=True)
    member_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    cercles = relationship("Cercle", back_populates="region", cascade="all, delete-orphan", order_by="Cercle.name")

    def __repr__(self):
        return f"<Region {self.code} {self.name}>"


class Cercle(Base):
    __tablename__ = "cercles"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    region_id = Column(Uuid, ForeignKey("regions_table.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    code = Column(String(20), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    region = relationship("Region", back_populates="cercles")
    communes = relationship("Commune", back_populates="cercle", cascade="all, delete-orphan", order_by="Commune.name")

    def __repr__(self):
        return f"<Cercle {self.code} {self.name}>"


class Commune(Base):
    __tablename__ = "communes"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    cercle_id = Column(Uuid, ForeignKey("cercles.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    code = Column(String(64), nullable=False, unique=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False)

    cercle = relationship("Cercle", back_populates="communes")

    def __repr__(self):
        return f"<Commune {self.code} {self.name}>"
