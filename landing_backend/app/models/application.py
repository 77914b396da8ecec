"""
Application model - candidate applying to a vacancy (one per vacancy + email)
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class Application(Base):
    __tablename__ = "applications"
    __table_args__ = (
        UniqueConstraint("id_vacancy", "email", name="uq_applications_vacancy_email"),
    )

    id = Column(String(36), primary_key=True, default=generate_uuid)
    vacancy_id = Column(
        "id_vacancy", String(36), ForeignKey("vacancies.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    phone = Column(String(50), nullable=False)
    status = Column(String(20), default="pending", nullable=False, index=True)
    application_motivation = Column(Text, nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    cv_url = Column(String(1024), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    vacancy = relationship("Vacancy", back_populates="applications")
