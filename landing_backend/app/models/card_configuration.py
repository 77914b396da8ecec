"""
Card configuration model - theming of a user's landing card (1:1 with user)
"""
from datetime import datetime

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from landing_backend.app.db.base import Base, generate_uuid


class CardConfiguration(Base):
    __tablename__ = "card_configurations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(
        "id_user", String(36), ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False, index=True
    )

    image_size = Column(Integer, nullable=True)
    image_left_offset = Column(String(50), nullable=True)
    bg_color = Column(String(20), nullable=True)

    text_above = Column(Text, nullable=True)
    text_above_color = Column(String(20), nullable=True)
    above_font_family = Column(String(255), nullable=True)
    above_font_size = Column(String(50), nullable=True)
    above_font_weight = Column(String(50), nullable=True)
    above_letter_spacing = Column(String(50), nullable=True)
    above_text_transform = Column(String(50), nullable=True)
    above_text_top_offset = Column(String(50), nullable=True)

    text_below = Column(Text, nullable=True)
    text_below_color = Column(String(20), nullable=True)
    below_font_family = Column(String(255), nullable=True)
    below_font_size = Column(String(50), nullable=True)
    below_font_weight = Column(String(50), nullable=True)
    below_letter_spacing = Column(String(50), nullable=True)
    below_text_transform = Column(String(50), nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    user = relationship("User", back_populates="card_configuration")
