"""
Vacancy model - job opening published on the landing site
"""
from datetime import datetime

from sqlalchemy import JSON, Boolean, Column, DateTime, Integer, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class Vacancy(Base):
    __tablename__ = "vacancies"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    job_title = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    mode = Column(String(20), nullable=False)  # Remoto | Presencial | Híbrido
    years_experience = Column(Integer, nullable=False, default=0)
    short_description = Column(String(500), nullable=False)
    description = Column(Text, nullable=False)
    stack_required = Column(JSON, default=list, nullable=False)  # ["React", "Node.js"]
    is_active = Column(Boolean, default=True, nullable=False)
    status = Column(String(20), default="open", nullable=False, index=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    applications = relationship(
        "Application",
        back_populates="vacancy",
        cascade="all, delete-orphan",
        order_by="Application.created_at.desc()",
    )
