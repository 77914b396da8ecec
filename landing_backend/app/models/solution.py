"""
Solution and Feature models - services showcased on the landing page
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class Solution(Base):
    __tablename__ = "solutions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    title = Column(String(255), nullable=False)
    icon = Column(String(255), nullable=True)
    description = Column(Text, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    order = Column(Integer, default=0, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    features = relationship(
        "Feature",
        back_populates="solution",
        cascade="all, delete-orphan",
        order_by="Feature.created_at",
    )


class Feature(Base):
    __tablename__ = "features"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    solution_id = Column(
        "id_solution", String(36), ForeignKey("solutions.id", ondelete="CASCADE"), nullable=False, index=True
    )
    feature_description = Column(String(500), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    solution = relationship("Solution", back_populates="features")
