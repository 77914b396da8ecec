"""
Curriculum model - about-me text and social slugs (1:1 with user)
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class Curriculum(Base):
    __tablename__ = "curriculums"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(
        "id_user", String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
    )
    about_me = Column(Text, nullable=True)
    github_slug = Column(String(255), nullable=True)
    linkedin_slug = Column(String(255), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="curriculum")
