"""
Work experience model - one position held by a user
"""
from datetime import datetime

from sqlalchemy import Column, Date, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class WorkExperience(Base):
    __tablename__ = "work_experiences"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column("id_user", String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    role = Column(String(255), nullable=False)
    company_name = Column(String(255), nullable=False)
    from_year = Column(Date, nullable=False)
    until_year = Column(Date, nullable=True)  # null = current position
    role_description = Column(Text, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="work_experiences")
