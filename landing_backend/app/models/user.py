"""
User database model - public profile owning card, curriculum, skills, experiences and blogs
"""
from datetime import datetime

from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    role = Column(String(100), nullable=True)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    image = Column(String(512), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    show_curriculum = Column(Boolean, default=False, nullable=False)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    card_configuration = relationship(
        "CardConfiguration", back_populates="user", uselist=False, cascade="all, delete-orphan"
    )
    curriculum = relationship("Curriculum", back_populates="user", uselist=False, cascade="all, delete-orphan")
    skills = relationship("Skill", back_populates="user", cascade="all, delete-orphan")
    work_experiences = relationship("WorkExperience", back_populates="user", cascade="all, delete-orphan")
    blogs = relationship("Blog", back_populates="user", cascade="all, delete-orphan")

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()
